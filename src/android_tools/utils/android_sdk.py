"""Android SDK and JDK tool discovery.

Every lookup takes a ToolEnvironment snapshot (a fresh one from the process
environment by default) and re-resolves from scratch; nothing is cached.
Resolution order for any tool is: PATH first, then SDK / JDK directories.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path
from typing import Final, Literal

from android_tools.exceptions import (
    AndroidSdkNotFoundError,
    AndroidToolNotFoundError,
    BuildToolsNotFoundError,
    BundletoolNotFoundError,
    CmdNotFoundError,
    PathNotFoundError,
    UnableToAccessHomeDirectoryError,
)
from android_tools.models.environment import ToolEnvironment, VersionPolicy

DEFAULT_BUNDLETOOL_VERSION: Final[str] = "1.8.2"

BinaryKind = Literal["exe", "bat"]

_VERSION_COMPONENT = re.compile(r"(\d+)(.*)")


def _env(env: ToolEnvironment | None) -> ToolEnvironment:
    return env if env is not None else ToolEnvironment.from_os()


def binary_name(
    tool: str, env: ToolEnvironment | None = None, kind: BinaryKind = "exe"
) -> str:
    """Return the platform-specific file name of a tool (.exe / .bat on Windows)."""
    if _env(env).is_windows:
        return f"{tool}.{kind}"
    return tool


def find_on_path(
    tool: str, env: ToolEnvironment | None = None, kind: BinaryKind = "exe"
) -> Path | None:
    """Search the snapshot's PATH for a tool.

    Returns:
        Path to the executable, or None when PATH is unset or has no match.
    """
    env = _env(env)
    if not env.path:
        return None
    found = shutil.which(binary_name(tool, env, kind), path=env.path)
    return Path(found) if found else None


def default_sdk_locations(env: ToolEnvironment | None = None) -> list[Path]:
    """Common Android SDK install locations for the host platform."""
    env = _env(env)
    home = env.home

    locations: list[Path] = []
    if env.system == "Darwin":  # macOS
        if home:
            locations.append(home / "Library" / "Android" / "sdk")
        locations.append(Path("/opt/android-sdk"))
    elif env.system == "Linux":
        if home:
            locations.extend([home / "Android" / "Sdk", home / "android-sdk"])
        locations.append(Path("/opt/android-sdk"))
    elif env.system == "Windows":
        if home:
            locations.append(home / "AppData" / "Local" / "Android" / "Sdk")
        locations.append(Path("C:/Android/sdk"))
    return locations


def get_android_home(env: ToolEnvironment | None = None) -> Path | None:
    """Get Android SDK root directory.

    The first set variable among ANDROID_SDK_ROOT, ANDROID_SDK_PATH and
    ANDROID_HOME wins, whether or not it exists. Otherwise the first existing
    platform default location is used.

    Returns:
        Path to Android SDK root, or None if not found.
    """
    env = _env(env)
    if candidates := env.sdk_root_candidates:
        return Path(candidates[0])

    for location in default_sdk_locations(env):
        if location.is_dir():
            return location

    return None


def require_android_home(env: ToolEnvironment | None = None) -> Path:
    """Get the Android SDK root, failing when it is unknown or missing.

    Raises:
        AndroidSdkNotFoundError: If no SDK root could be determined.
        PathNotFoundError: If the selected SDK root is not a directory.
    """
    android_home = get_android_home(env)
    if android_home is None:
        raise AndroidSdkNotFoundError()
    if not android_home.is_dir():
        raise PathNotFoundError(android_home)
    return android_home


def version_sort_key(
    name: str, policy: VersionPolicy = VersionPolicy.LEXICOGRAPHIC
) -> str | tuple[tuple[int, str], ...]:
    """Sort key for a versioned directory name under the given policy.

    The lexicographic policy compares names as plain strings, so "9.0.0" sorts
    above "29.0.2". The semantic policy compares each dot-separated component
    numerically, with any non-numeric suffix ("-rc1") as a tie-breaker.
    """
    if policy is VersionPolicy.LEXICOGRAPHIC:
        return name

    key: list[tuple[int, str]] = []
    for part in name.split("."):
        match = _VERSION_COMPONENT.match(part)
        if match:
            key.append((int(match.group(1)), match.group(2)))
        else:
            key.append((-1, part))
    return tuple(key)


def latest_version_dir(
    parent: Path, policy: VersionPolicy = VersionPolicy.LEXICOGRAPHIC
) -> Path:
    """Select the newest version subdirectory of a directory.

    Only immediate subdirectories whose names start with an ASCII digit are
    considered.

    Raises:
        PathNotFoundError: If parent cannot be listed.
        BuildToolsNotFoundError: If no version directory exists.
    """
    try:
        entries = list(parent.iterdir())
    except OSError as e:
        raise PathNotFoundError(parent) from e

    names = [
        entry.name
        for entry in entries
        if entry.is_dir() and entry.name[:1].isascii() and entry.name[:1].isdigit()
    ]
    if not names:
        raise BuildToolsNotFoundError(parent)

    return parent / max(names, key=lambda name: version_sort_key(name, policy))


def get_build_tools_path(env: ToolEnvironment | None = None) -> Path:
    """Get the latest Android build-tools directory.

    Returns:
        Path to build-tools directory (e.g., .../build-tools/35.0.0/).

    Raises:
        AndroidSdkNotFoundError: If the Android SDK was not found.
        BuildToolsNotFoundError: If the SDK has no build-tools versions.
    """
    env = _env(env)
    android_home = require_android_home(env)

    build_tools_dir = android_home / "build-tools"
    if not build_tools_dir.is_dir():
        raise BuildToolsNotFoundError(build_tools_dir)

    return latest_version_dir(build_tools_dir, env.version_policy)


def locate_build_tool(
    tool: str, env: ToolEnvironment | None = None, kind: BinaryKind = "exe"
) -> Path:
    """Resolve a tool hosted in build-tools/<version>/.

    Raises:
        AndroidToolNotFoundError: If the tool is absent from the latest build-tools.
    """
    env = _env(env)
    if on_path := find_on_path(tool, env, kind):
        return on_path

    candidate = get_build_tools_path(env) / binary_name(tool, env, kind)
    if not candidate.is_file():
        raise AndroidToolNotFoundError(tool, candidate)
    return candidate


def get_aapt2(env: ToolEnvironment | None = None) -> Path:
    """Get path to aapt2 binary."""
    return locate_build_tool("aapt2", env)


def get_zipalign(env: ToolEnvironment | None = None) -> Path:
    """Get path to zipalign binary."""
    return locate_build_tool("zipalign", env)


def get_apksigner(env: ToolEnvironment | None = None) -> Path:
    """Get path to apksigner (a wrapper script, .bat on Windows)."""
    return locate_build_tool("apksigner", env, kind="bat")


def get_adb(env: ToolEnvironment | None = None) -> Path:
    """Get path to adb, falling back to <sdk>/platform-tools."""
    env = _env(env)
    if on_path := find_on_path("adb", env):
        return on_path

    candidate = require_android_home(env) / "platform-tools" / binary_name("adb", env)
    if not candidate.is_file():
        raise AndroidToolNotFoundError("adb", candidate)
    return candidate


def get_emulator(env: ToolEnvironment | None = None) -> Path:
    """Get path to the emulator binary.

    Looks in <sdk>/emulator directly, then in its newest version subdirectory.
    """
    env = _env(env)
    if on_path := find_on_path("emulator", env):
        return on_path

    emulator_dir = require_android_home(env) / "emulator"
    if not emulator_dir.is_dir():
        raise PathNotFoundError(emulator_dir)

    name = binary_name("emulator", env)
    candidate = emulator_dir / name
    if candidate.is_file():
        return candidate

    try:
        candidate = latest_version_dir(emulator_dir, env.version_policy) / name
    except BuildToolsNotFoundError:
        raise AndroidToolNotFoundError("emulator", emulator_dir / name) from None
    if not candidate.is_file():
        raise AndroidToolNotFoundError("emulator", candidate)
    return candidate


def get_java_tool(tool: str, env: ToolEnvironment | None = None) -> Path:
    """Resolve a JDK tool (keytool, jarsigner, java) via PATH, then JAVA_HOME/bin.

    Raises:
        CmdNotFoundError: If the tool is in neither location.
    """
    env = _env(env)
    if on_path := find_on_path(tool, env):
        return on_path

    if env.java_home:
        candidate = Path(env.java_home) / "bin" / binary_name(tool, env)
        if candidate.exists():
            return candidate

    raise CmdNotFoundError(tool, "Install a JDK and set JAVA_HOME or add it to PATH")


def get_keytool(env: ToolEnvironment | None = None) -> Path:
    return get_java_tool("keytool", env)


def get_jarsigner(env: ToolEnvironment | None = None) -> Path:
    return get_java_tool("jarsigner", env)


def get_bundletool_jar(env: ToolEnvironment | None = None) -> Path:
    """Locate the bundletool JAR.

    Uses BUNDLETOOL_PATH when set; otherwise ~/bundletool-all-<version>.jar,
    where <version> is BUNDLETOOL_VERSION or DEFAULT_BUNDLETOOL_VERSION.

    Raises:
        UnableToAccessHomeDirectoryError: If the fallback needs an unknown home.
        BundletoolNotFoundError: If the fallback JAR does not exist.
    """
    env = _env(env)
    if env.bundletool_path:
        return Path(env.bundletool_path)

    if env.home is None:
        raise UnableToAccessHomeDirectoryError()

    version = env.bundletool_version or DEFAULT_BUNDLETOOL_VERSION
    jar = env.home / f"bundletool-all-{version}.jar"
    if not jar.exists():
        raise BundletoolNotFoundError(jar)
    return jar


def get_bundletool_command(env: ToolEnvironment | None = None) -> list[str]:
    """Build the `java -jar <bundletool.jar>` command prefix."""
    env = _env(env)
    jar = get_bundletool_jar(env)
    java = get_java_tool("java", env)
    return [str(java), "-jar", str(jar)]


def android_dir(env: ToolEnvironment | None = None) -> Path:
    """Return ~/.android, creating it if needed (keystore location)."""
    env = _env(env)
    if env.home is None:
        raise UnableToAccessHomeDirectoryError()
    directory = env.home / ".android"
    directory.mkdir(parents=True, exist_ok=True)
    return directory
