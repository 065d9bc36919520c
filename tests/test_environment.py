"""Unit tests for ToolEnvironment and the config layer.

Tests cover:
- from_mapping purity and empty-value handling
- from_os layering of environment variables over config.json
- Config loading, caching and invalid files
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from android_tools.models.environment import ToolEnvironment, VersionPolicy
from android_tools.utils import config


# ---------------------------------------------------------------------------
# ToolEnvironment.from_mapping
# ---------------------------------------------------------------------------


class TestFromMapping:
    def test_reads_known_variables(self):
        env = ToolEnvironment.from_mapping(
            {
                "PATH": "/usr/bin",
                "ANDROID_HOME": "/sdk",
                "JAVA_HOME": "/jdk",
                "BUNDLETOOL_VERSION": "1.15.0",
                "UNRELATED": "x",
            }
        )
        assert env.path == "/usr/bin"
        assert env.android_home == "/sdk"
        assert env.java_home == "/jdk"
        assert env.bundletool_version == "1.15.0"
        assert env.android_sdk_root is None

    def test_empty_values_are_unset(self):
        env = ToolEnvironment.from_mapping(
            {"ANDROID_SDK_ROOT": "", "ANDROID_HOME": "/sdk"}
        )
        assert env.android_sdk_root is None
        assert env.sdk_root_candidates == ["/sdk"]

    def test_overrides(self, tmp_path):
        env = ToolEnvironment.from_mapping(
            {}, system="Windows", home=tmp_path, version_policy="semantic"
        )
        assert env.is_windows
        assert env.home == tmp_path
        assert env.version_policy is VersionPolicy.SEMANTIC

    def test_ignores_config_file(self, write_config):
        write_config({"android_home": "/configured"})
        assert ToolEnvironment.from_mapping({}).android_home is None

    def test_snapshot_is_frozen(self):
        env = ToolEnvironment.from_mapping({"ANDROID_HOME": "/sdk"})
        with pytest.raises(ValidationError):
            env.android_home = "/other"

    def test_sdk_root_candidates_order(self):
        env = ToolEnvironment.from_mapping(
            {"ANDROID_HOME": "/c", "ANDROID_SDK_PATH": "/b", "ANDROID_SDK_ROOT": "/a"}
        )
        assert env.sdk_root_candidates == ["/a", "/b", "/c"]


# ---------------------------------------------------------------------------
# ToolEnvironment.from_os
# ---------------------------------------------------------------------------


class TestFromOs:
    @pytest.fixture(autouse=True)
    def clean_environ(self, monkeypatch):
        for var in (
            "ANDROID_SDK_ROOT",
            "ANDROID_SDK_PATH",
            "ANDROID_HOME",
            "ANDROID_NDK_HOME",
            "JAVA_HOME",
            "BUNDLETOOL_PATH",
            "BUNDLETOOL_VERSION",
        ):
            monkeypatch.delenv(var, raising=False)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ANDROID_SDK_ROOT", "/from-env")
        monkeypatch.setenv("PATH", "/bin")
        env = ToolEnvironment.from_os()
        assert env.android_sdk_root == "/from-env"
        assert env.path == "/bin"

    def test_config_fills_unset_variables(self, write_config):
        write_config({"java_home": "/configured-jdk", "bundletool_version": "1.9.0"})
        env = ToolEnvironment.from_os()
        assert env.java_home == "/configured-jdk"
        assert env.bundletool_version == "1.9.0"

    def test_environment_wins_over_config(self, monkeypatch, write_config):
        write_config({"java_home": "/configured-jdk"})
        monkeypatch.setenv("JAVA_HOME", "/env-jdk")
        assert ToolEnvironment.from_os().java_home == "/env-jdk"

    def test_version_policy_from_config(self, write_config):
        write_config({"version_policy": "semantic"})
        assert ToolEnvironment.from_os().version_policy is VersionPolicy.SEMANTIC

    def test_invalid_version_policy_is_ignored(self, write_config):
        write_config({"version_policy": "newest"})
        assert ToolEnvironment.from_os().version_policy is VersionPolicy.LEXICOGRAPHIC

    def test_non_string_config_values_are_ignored(self, write_config):
        write_config({"android_home": 42})
        assert ToolEnvironment.from_os().android_home is None


# ---------------------------------------------------------------------------
# Config file
# ---------------------------------------------------------------------------


class TestConfig:
    def test_missing_file_is_empty(self):
        assert config.load_config() == {}

    def test_values_are_cached_until_reload(self, isolated_config: Path, write_config):
        write_config({"java_home": "/one"})
        assert config.get_config_value("java_home") == "/one"

        isolated_config.write_text('{"java_home": "/two"}')
        assert config.get_config_value("java_home") == "/one"

        config.reload_config()
        assert config.get_config_value("java_home") == "/two"

    def test_invalid_json_is_empty(self, isolated_config: Path):
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text("{not json")
        config.reload_config()
        assert config.load_config() == {}

    def test_non_object_json_is_empty(self, isolated_config: Path):
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text("[1, 2]")
        config.reload_config()
        assert config.load_config() == {}

    def test_get_config_value_default(self):
        assert config.get_config_value("missing", "fallback") == "fallback"

    def test_get_config_str_rejects_empty(self, write_config):
        write_config({"java_home": ""})
        assert config.get_config_str("java_home") is None

    def test_config_values_skips_unset_and_non_strings(self, write_config):
        write_config({"java_home": "/jdk", "android_home": 3, "path": "/bin"})
        assert config.config_values(["java_home", "android_home"]) == {
            "java_home": "/jdk"
        }
