"""Terminal output for android-tools, built on rich.

All user-facing messages go through the module-level ``console``. JSON mode
silences everything except explicit JSON payloads, and verbose mode echoes
each spawned command before it runs.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.status import Status

from android_tools.exceptions import ProcessError

_ICONS = {
    "success": "[green]✓[/green]",
    "error": "[red]✗[/red]",
    "info": "[blue]ℹ[/blue]",
    "warning": "[yellow]⚠[/yellow]",
}


class Console:
    """rich.Console wrapper with status icons, JSON mode and command echo."""

    def __init__(self) -> None:
        self._console = RichConsole()
        self._json_mode = False
        self._verbose = False

    def set_json_mode(self, enabled: bool) -> None:
        self._json_mode = enabled

    @property
    def json_mode(self) -> bool:
        return self._json_mode

    def set_verbose(self, enabled: bool) -> None:
        self._verbose = enabled

    @property
    def verbose(self) -> bool:
        return self._verbose

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to the terminal unless JSON mode is on."""
        if not self._json_mode:
            self._console.print(*args, **kwargs)

    def _emit(self, kind: str, message: str) -> None:
        self.print(f"{_ICONS[kind]} {message}")

    def print_success(self, message: str) -> None:
        self._emit("success", message)

    def print_error(self, message: str) -> None:
        # Error text often embeds paths or tool output with brackets
        self._emit("error", escape(message))

    def print_info(self, message: str) -> None:
        self._emit("info", message)

    def print_warning(self, message: str) -> None:
        self._emit("warning", message)

    def print_command(self, command: str) -> None:
        """Echo a command line about to be spawned (verbose mode only)."""
        if self._verbose:
            self.print(f"[dim]$ {escape(command)}[/dim]")

    def print_process_error(self, tool: str, error: ProcessError) -> None:
        """Report a failed tool run: exit status, command line and stderr."""
        self.print_error(f"{tool} failed (exit {error.returncode}): {error.command}")
        if error.stderr:
            self.print(error.stderr.rstrip(), markup=False, highlight=False)

    def status(self, message: str) -> Status:
        """Spinner context manager for long-running tool invocations."""
        return self._console.status(message)


console = Console()
