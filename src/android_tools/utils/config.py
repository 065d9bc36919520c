"""User defaults for the tool locator, read from ~/.android-tools/config.json.

The file is a flat JSON object keyed by ToolEnvironment field names::

    {"android_sdk_root": "/opt/android-sdk", "version_policy": "semantic"}

Environment variables always win over values found here.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

CONFIG_FILE = Path.home() / ".android-tools" / "config.json"


@lru_cache(maxsize=1)
def load_config() -> dict[str, Any]:
    """Parse the config file once. A missing or malformed file reads as {}."""
    try:
        data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def get_config_value(key: str, default: Any | None = None) -> Any | None:
    return load_config().get(key, default)


def get_config_str(key: str) -> str | None:
    """Fetch a non-empty string value; other JSON types are ignored."""
    value = get_config_value(key)
    return value if isinstance(value, str) and value else None


def config_values(keys: Iterable[str]) -> dict[str, str]:
    """Collect the configured string values for the given keys."""
    return {key: value for key in keys if (value := get_config_str(key))}


def reload_config() -> None:
    """Drop the cached file contents; the next lookup re-reads the file."""
    load_config.cache_clear()
