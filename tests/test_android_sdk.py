"""Unit tests for tool discovery (android_tools.utils.android_sdk).

Tests cover:
- SDK root precedence and platform defaults
- Version directory selection under both policies
- PATH precedence over SDK / JDK directories
- JDK tools via JAVA_HOME, including Windows names
- bundletool JAR resolution
- Error types for every failure path
"""

from __future__ import annotations

from pathlib import Path

import pytest

from android_tools.exceptions import (
    AndroidSdkNotFoundError,
    AndroidToolNotFoundError,
    BuildToolsNotFoundError,
    BundletoolNotFoundError,
    CmdNotFoundError,
    PathNotFoundError,
    ToolNotFoundError,
    UnableToAccessHomeDirectoryError,
)
from android_tools.models.environment import ToolEnvironment, VersionPolicy
from android_tools.utils.android_sdk import (
    android_dir,
    binary_name,
    get_aapt2,
    get_adb,
    get_android_home,
    get_apksigner,
    get_build_tools_path,
    get_bundletool_command,
    get_bundletool_jar,
    get_emulator,
    get_java_tool,
    get_keytool,
    latest_version_dir,
    require_android_home,
    version_sort_key,
)
from conftest import make_executable


def env_for(
    home: Path | None = None, system: str = "Linux", **variables: str
) -> ToolEnvironment:
    return ToolEnvironment.from_mapping(variables, system=system, home=home)


# ---------------------------------------------------------------------------
# SDK root
# ---------------------------------------------------------------------------


class TestAndroidHome:
    def test_first_set_variable_wins(self, tmp_path):
        env = env_for(
            ANDROID_SDK_PATH=str(tmp_path / "b"),
            ANDROID_HOME=str(tmp_path / "c"),
        )
        assert get_android_home(env) == tmp_path / "b"

    def test_variable_wins_even_if_missing(self, tmp_path, home_dir):
        (home_dir / "Android" / "Sdk").mkdir(parents=True)
        env = env_for(home=home_dir, ANDROID_HOME=str(tmp_path / "missing"))
        assert get_android_home(env) == tmp_path / "missing"
        with pytest.raises(PathNotFoundError):
            require_android_home(env)

    def test_linux_default_location(self, home_dir):
        default = home_dir / "Android" / "Sdk"
        default.mkdir(parents=True)
        assert get_android_home(env_for(home=home_dir)) == default

    def test_macos_default_location(self, home_dir):
        default = home_dir / "Library" / "Android" / "sdk"
        default.mkdir(parents=True)
        assert get_android_home(env_for(home=home_dir, system="Darwin")) == default

    def test_defaults_are_never_created(self, home_dir):
        get_android_home(env_for(home=home_dir))
        assert list(home_dir.iterdir()) == []

    def test_not_found(self, home_dir):
        with pytest.raises(AndroidSdkNotFoundError) as exc_info:
            require_android_home(env_for(home=home_dir, system="FreeBSD"))
        assert isinstance(exc_info.value, ToolNotFoundError)


# ---------------------------------------------------------------------------
# Version directories
# ---------------------------------------------------------------------------


class TestVersionSelection:
    def test_lexicographic_maximum(self, fake_sdk):
        latest = latest_version_dir(fake_sdk / "build-tools")
        assert latest.name == "9.0.0"

    def test_semantic_maximum(self, fake_sdk):
        latest = latest_version_dir(fake_sdk / "build-tools", VersionPolicy.SEMANTIC)
        assert latest.name == "29.0.2"

    def test_semantic_compares_numerically(self):
        key = lambda name: version_sort_key(name, VersionPolicy.SEMANTIC)
        assert key("10.0.0") > key("9.0.0")
        assert key("34.0.0-rc1") > key("33.0.2")
        assert version_sort_key("9.0.0") > version_sort_key("10.0.0")

    def test_non_digit_and_file_entries_are_ignored(self, tmp_path):
        parent = tmp_path / "build-tools"
        (parent / "30.0.3").mkdir(parents=True)
        (parent / "latest").mkdir()
        (parent / "99.0.0").write_text("not a directory")
        assert latest_version_dir(parent).name == "30.0.3"

    def test_no_version_directory(self, tmp_path):
        parent = tmp_path / "build-tools"
        (parent / "preview").mkdir(parents=True)
        with pytest.raises(BuildToolsNotFoundError):
            latest_version_dir(parent)

    def test_unreadable_parent(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            latest_version_dir(tmp_path / "missing")

    def test_build_tools_path_uses_policy(self, fake_sdk, sdk_env):
        assert get_build_tools_path(sdk_env).name == "9.0.0"
        semantic = sdk_env.model_copy(update={"version_policy": VersionPolicy.SEMANTIC})
        assert get_build_tools_path(semantic).name == "29.0.2"

    def test_missing_build_tools_directory(self, tmp_path):
        sdk = tmp_path / "sdk"
        sdk.mkdir()
        with pytest.raises(BuildToolsNotFoundError):
            get_build_tools_path(env_for(ANDROID_SDK_ROOT=str(sdk)))


# ---------------------------------------------------------------------------
# Build tools, adb, emulator
# ---------------------------------------------------------------------------


class TestSdkTools:
    def test_aapt2_from_latest_build_tools(self, fake_sdk, sdk_env):
        assert get_aapt2(sdk_env) == fake_sdk / "build-tools" / "9.0.0" / "aapt2"

    def test_path_takes_precedence(self, tmp_path, fake_sdk, sdk_env):
        bin_dir = tmp_path / "bin"
        on_path = make_executable(bin_dir / "aapt2")
        env = sdk_env.model_copy(update={"path": str(bin_dir)})
        assert get_aapt2(env) == on_path

    def test_tool_missing_from_build_tools(self, fake_sdk, sdk_env):
        (fake_sdk / "build-tools" / "9.0.0" / "aapt2").unlink()
        with pytest.raises(AndroidToolNotFoundError) as exc_info:
            get_aapt2(sdk_env)
        assert exc_info.value.path == fake_sdk / "build-tools" / "9.0.0" / "aapt2"

    def test_apksigner_is_bat_on_windows(self, fake_sdk, sdk_env):
        make_executable(fake_sdk / "build-tools" / "9.0.0" / "apksigner.bat")
        env = sdk_env.model_copy(update={"system": "Windows"})
        assert get_apksigner(env).name == "apksigner.bat"

    def test_adb_from_platform_tools(self, fake_sdk, sdk_env):
        assert get_adb(sdk_env) == fake_sdk / "platform-tools" / "adb"

    def test_adb_missing(self, fake_sdk, sdk_env):
        (fake_sdk / "platform-tools" / "adb").unlink()
        with pytest.raises(AndroidToolNotFoundError):
            get_adb(sdk_env)

    def test_emulator_directly_in_folder(self, fake_sdk, sdk_env):
        assert get_emulator(sdk_env) == fake_sdk / "emulator" / "emulator"

    def test_emulator_in_version_subfolder(self, fake_sdk, sdk_env):
        (fake_sdk / "emulator" / "emulator").unlink()
        versioned = make_executable(fake_sdk / "emulator" / "31.3.10" / "emulator")
        assert get_emulator(sdk_env) == versioned

    def test_emulator_folder_without_binary_or_versions(self, fake_sdk, sdk_env):
        (fake_sdk / "emulator" / "emulator").unlink()
        with pytest.raises(AndroidToolNotFoundError) as exc_info:
            get_emulator(sdk_env)
        assert exc_info.value.tool == "emulator"
        assert exc_info.value.path == fake_sdk / "emulator" / "emulator"

    def test_emulator_folder_missing(self, fake_sdk, sdk_env):
        (fake_sdk / "emulator" / "emulator").unlink()
        (fake_sdk / "emulator").rmdir()
        with pytest.raises(PathNotFoundError):
            get_emulator(sdk_env)

    def test_binary_name(self):
        assert binary_name("adb", env_for(system="Windows")) == "adb.exe"
        windows = env_for(system="Windows")
        assert binary_name("apksigner", windows, "bat") == "apksigner.bat"
        assert binary_name("adb", env_for(system="Linux")) == "adb"

    def test_resolution_is_never_cached(self, fake_sdk, sdk_env):
        assert get_build_tools_path(sdk_env).name == "9.0.0"
        make_executable(fake_sdk / "build-tools" / "90.0.0" / "aapt2")
        assert get_build_tools_path(sdk_env).name == "90.0.0"


# ---------------------------------------------------------------------------
# JDK tools
# ---------------------------------------------------------------------------


class TestJavaTools:
    def test_keytool_from_java_home(self, fake_jdk, home_dir):
        env = env_for(home=home_dir, JAVA_HOME=str(fake_jdk))
        assert get_keytool(env) == fake_jdk / "bin" / "keytool"

    def test_keytool_exe_on_windows(self, tmp_path, home_dir):
        jdk = tmp_path / "winjdk"
        keytool = make_executable(jdk / "bin" / "keytool.exe")
        env = env_for(home=home_dir, system="Windows", JAVA_HOME=str(jdk))
        assert get_keytool(env) == keytool

    def test_path_before_java_home(self, tmp_path, fake_jdk, home_dir):
        on_path = make_executable(tmp_path / "bin" / "keytool")
        env = env_for(
            home=home_dir, JAVA_HOME=str(fake_jdk), PATH=str(tmp_path / "bin")
        )
        assert get_keytool(env) == on_path

    def test_not_found(self, home_dir):
        with pytest.raises(CmdNotFoundError) as exc_info:
            get_java_tool("jarsigner", env_for(home=home_dir))
        assert exc_info.value.tool == "jarsigner"


# ---------------------------------------------------------------------------
# bundletool
# ---------------------------------------------------------------------------


class TestBundletool:
    def test_bundletool_path_is_used_unchecked(self, tmp_path, home_dir):
        env = env_for(home=home_dir, BUNDLETOOL_PATH=str(tmp_path / "bt.jar"))
        assert get_bundletool_jar(env) == tmp_path / "bt.jar"

    def test_default_version_in_home(self, home_dir):
        jar = home_dir / "bundletool-all-1.8.2.jar"
        jar.write_text("jar")
        assert get_bundletool_jar(env_for(home=home_dir)) == jar

    def test_bundletool_version_variable(self, home_dir):
        jar = home_dir / "bundletool-all-1.15.6.jar"
        jar.write_text("jar")
        env = env_for(home=home_dir, BUNDLETOOL_VERSION="1.15.6")
        assert get_bundletool_jar(env) == jar

    def test_jar_missing(self, home_dir):
        with pytest.raises(BundletoolNotFoundError) as exc_info:
            get_bundletool_jar(env_for(home=home_dir))
        assert exc_info.value.searched == home_dir / "bundletool-all-1.8.2.jar"

    def test_no_home_directory(self):
        with pytest.raises(UnableToAccessHomeDirectoryError):
            get_bundletool_jar(env_for(home=None))

    def test_command_prefix(self, tmp_path, fake_jdk, home_dir):
        env = env_for(
            home=home_dir,
            JAVA_HOME=str(fake_jdk),
            BUNDLETOOL_PATH=str(tmp_path / "bt.jar"),
        )
        assert get_bundletool_command(env) == [
            str(fake_jdk / "bin" / "java"),
            "-jar",
            str(tmp_path / "bt.jar"),
        ]


# ---------------------------------------------------------------------------
# ~/.android
# ---------------------------------------------------------------------------


class TestAndroidDir:
    def test_creates_directory(self, home_dir):
        directory = android_dir(env_for(home=home_dir))
        assert directory == home_dir / ".android"
        assert directory.is_dir()

    def test_no_home(self):
        with pytest.raises(UnableToAccessHomeDirectoryError):
            android_dir(env_for(home=None))


def test_default_snapshot_comes_from_os(monkeypatch, fake_sdk):
    monkeypatch.setenv("ANDROID_SDK_ROOT", str(fake_sdk))
    assert get_android_home() == fake_sdk
