"""Typed exception hierarchy for android-tools."""

from pathlib import Path


class AndroidToolsError(Exception):
    """Base exception for all android-tools errors."""

    pass


class ToolNotFoundError(AndroidToolsError):
    """Raised when a required external tool cannot be resolved."""

    def __init__(self, tool: str, install_hint: str | None = None):
        self.tool = tool
        self.install_hint = install_hint
        message = f"Required tool not found: {tool}"
        if install_hint:
            message += f"\nInstall: {install_hint}"
        super().__init__(message)


class CmdNotFoundError(ToolNotFoundError):
    """Raised when no resolution strategy produced an executable."""

    pass


class AndroidSdkNotFoundError(ToolNotFoundError):
    """Raised when no Android SDK root could be determined."""

    def __init__(self) -> None:
        super().__init__(
            "Android SDK",
            "Set ANDROID_SDK_ROOT (or ANDROID_SDK_PATH / ANDROID_HOME) "
            "or install the Android SDK",
        )


class AndroidToolNotFoundError(ToolNotFoundError):
    """Raised when a tool is missing from the SDK directory that should host it."""

    def __init__(self, tool: str, path: Path):
        self.path = path
        super().__init__(tool, f"Expected at {path}, install via Android SDK Manager")


class BuildToolsNotFoundError(ToolNotFoundError):
    """Raised when the SDK has no usable build-tools version directory."""

    def __init__(self, build_tools_dir: Path | None = None):
        self.build_tools_dir = build_tools_dir
        hint = "Install build-tools via Android SDK Manager"
        if build_tools_dir is not None:
            hint += f" in {build_tools_dir}"
        super().__init__("Android build-tools", hint)


class BundletoolNotFoundError(ToolNotFoundError):
    """Raised when the bundletool JAR is not found."""

    def __init__(self, searched: Path | None = None):
        self.searched = searched
        hint = "Set BUNDLETOOL_PATH to the bundletool-all-<version>.jar file"
        if searched is not None:
            hint += f" (looked for {searched})"
        super().__init__("bundletool", hint)


class PathNotFoundError(AndroidToolsError):
    """Raised when a directory expected to exist does not."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Path not found: {path}")


class ProcessError(AndroidToolsError):
    """Raised when a subprocess exits with a non-zero status."""

    def __init__(
        self,
        command: str,
        returncode: int,
        stderr: str,
        stdout: str = "",
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command failed (exit {returncode}): {command}\n{stderr}")


class CommandExecutionError(AndroidToolsError):
    """Raised when a subprocess could not be spawned or waited on."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Command execution failed: {command}\n{reason}")


class CompiledResourcesNotFoundError(AndroidToolsError):
    """Raised when aapt2 produced no compiled resources where they were expected."""

    def __init__(self, path: Path | None = None):
        self.path = path
        message = "Compiled resources not found"
        if path is not None:
            message += f": {path}"
        super().__init__(message)


class UnableToAccessHomeDirectoryError(AndroidToolsError):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("Unable to access home directory")
