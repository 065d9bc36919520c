"""Pydantic model for the environment snapshot consumed by the tool locator."""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from android_tools.utils.config import config_values, get_config_str

# Environment variable -> model field. SDK variables are in precedence order.
ENV_FIELDS: Final[dict[str, str]] = {
    "PATH": "path",
    "ANDROID_SDK_ROOT": "android_sdk_root",
    "ANDROID_SDK_PATH": "android_sdk_path",
    "ANDROID_HOME": "android_home",
    "ANDROID_NDK_HOME": "android_ndk_home",
    "JAVA_HOME": "java_home",
    "BUNDLETOOL_PATH": "bundletool_path",
    "BUNDLETOOL_VERSION": "bundletool_version",
}


class VersionPolicy(StrEnum):
    """How versioned tool directories (build-tools/<version>) are ordered."""

    LEXICOGRAPHIC = "lexicographic"
    """Plain string comparison: "9.0.0" sorts above "29.0.2"."""

    SEMANTIC = "semantic"
    """Numeric comparison of dot-separated components."""


def _home_directory() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


class ToolEnvironment(BaseModel):
    """Immutable snapshot of everything the tool locator reads from the host."""

    model_config = ConfigDict(frozen=True)

    path: str | None = None
    """Executable search path (PATH)."""

    android_sdk_root: str | None = None
    android_sdk_path: str | None = None
    android_home: str | None = None
    android_ndk_home: str | None = None
    java_home: str | None = None
    bundletool_path: str | None = None
    bundletool_version: str | None = None

    system: str = Field(default_factory=platform.system)
    """Host OS name as reported by platform.system()."""

    home: Path | None = Field(default_factory=_home_directory)
    """User home directory, or None when it cannot be determined."""

    version_policy: VersionPolicy = VersionPolicy.LEXICOGRAPHIC

    @classmethod
    def from_mapping(
        cls, environ: Mapping[str, str], **overrides: object
    ) -> ToolEnvironment:
        """Build a snapshot from an arbitrary mapping (no config file involved).

        Empty values are treated as unset.
        """
        values: dict[str, object] = {
            field: environ[var]
            for var, field in ENV_FIELDS.items()
            if environ.get(var)
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_os(cls) -> ToolEnvironment:
        """Snapshot os.environ, layered over ~/.android-tools/config.json."""
        # PATH is never taken from the config file
        values: dict[str, object] = dict(
            config_values(f for f in ENV_FIELDS.values() if f != "path")
        )

        policy = get_config_str("version_policy")
        if policy in {p.value for p in VersionPolicy}:
            values["version_policy"] = VersionPolicy(policy)

        # Real environment variables win over configured values
        values.update(
            {
                field: os.environ[var]
                for var, field in ENV_FIELDS.items()
                if os.environ.get(var)
            }
        )
        return cls(**values)

    @property
    def is_windows(self) -> bool:
        return self.system == "Windows"

    @property
    def sdk_root_candidates(self) -> list[str]:
        """SDK root variables that are set, in precedence order."""
        return [
            value
            for value in (
                self.android_sdk_root,
                self.android_sdk_path,
                self.android_home,
            )
            if value
        ]


class ToolResolution(BaseModel):
    """Outcome of resolving one tool against an environment snapshot."""

    tool: str
    command: list[str] | None = None
    """Resolved command prefix, or None when resolution failed."""

    error: str | None = None

    @property
    def found(self) -> bool:
        return self.command is not None
