"""External tool dependency checker."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from android_tools.exceptions import AndroidToolsError, ToolNotFoundError
from android_tools.models.environment import ToolEnvironment, ToolResolution
from android_tools.utils.android_sdk import (
    get_aapt2,
    get_adb,
    get_apksigner,
    get_bundletool_command,
    get_emulator,
    get_jarsigner,
    get_java_tool,
    get_keytool,
    get_zipalign,
)

# Install hints for supported tools
TOOL_INSTALL_HINTS: dict[str, str] = {
    "aapt2": "Part of Android SDK build-tools (set ANDROID_SDK_ROOT)",
    "zipalign": "Part of Android SDK build-tools (set ANDROID_SDK_ROOT)",
    "apksigner": "Part of Android SDK build-tools (set ANDROID_SDK_ROOT)",
    "adb": "https://developer.android.com/tools/releases/platform-tools",
    "emulator": "Install the Android Emulator via Android SDK Manager",
    "java": "Install a JDK and set JAVA_HOME or add it to PATH",
    "keytool": "Part of Java JDK (set JAVA_HOME or add it to PATH)",
    "jarsigner": "Part of Java JDK (set JAVA_HOME or add it to PATH)",
    "bundletool": (
        "Download from https://github.com/google/bundletool/releases; "
        "set BUNDLETOOL_PATH or place bundletool-all-<version>.jar in your home "
        "directory"
    ),
}


Resolver = Callable[[ToolEnvironment], list[str]]


def _path(locate: Callable[[ToolEnvironment], Path]) -> Resolver:
    return lambda env: [str(locate(env))]


TOOL_RESOLVERS: dict[str, Resolver] = {
    "aapt2": _path(get_aapt2),
    "zipalign": _path(get_zipalign),
    "apksigner": _path(get_apksigner),
    "adb": _path(get_adb),
    "emulator": _path(get_emulator),
    "java": _path(lambda env: get_java_tool("java", env)),
    "keytool": _path(get_keytool),
    "jarsigner": _path(get_jarsigner),
    "bundletool": get_bundletool_command,
}


def resolve_tool(tool: str, env: ToolEnvironment | None = None) -> list[str]:
    """Resolve the command prefix used to invoke a tool.

    Raises:
        ValueError: If the tool is not one of TOOL_RESOLVERS.
        AndroidToolsError: If the tool cannot be located.
    """
    try:
        resolver = TOOL_RESOLVERS[tool]
    except KeyError:
        known = ", ".join(TOOL_RESOLVERS)
        raise ValueError(f"Unknown tool: {tool} (expected one of: {known})") from None
    return resolver(env if env is not None else ToolEnvironment.from_os())


def check_tool(tool: str, env: ToolEnvironment | None = None) -> ToolResolution:
    """Resolve a tool, capturing the failure instead of raising it."""
    try:
        return ToolResolution(tool=tool, command=resolve_tool(tool, env))
    except AndroidToolsError as e:
        return ToolResolution(tool=tool, error=str(e))


def require(*tools: str, env: ToolEnvironment | None = None) -> None:
    """Require that all specified tools are available.

    Raises:
        ToolNotFoundError: If any tool is not found.
    """
    env = env if env is not None else ToolEnvironment.from_os()
    for tool in tools:
        if not check_tool(tool, env).found:
            raise ToolNotFoundError(tool, TOOL_INSTALL_HINTS.get(tool))


def doctor(env: ToolEnvironment | None = None) -> list[ToolResolution]:
    """Resolve every supported tool against one environment snapshot."""
    env = env if env is not None else ToolEnvironment.from_os()
    return [check_tool(tool, env) for tool in TOOL_RESOLVERS]
