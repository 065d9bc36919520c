"""`aapt2 daemon`: run aapt2 in daemon mode."""

from pathlib import Path

from android_tools.aapt2.base import Aapt2Command
from android_tools.core.builder import Option


class Aapt2Daemon(Aapt2Command):
    """Runs aapt2 in daemon mode.

    Each line written to the daemon's stdin is one argument of a command; an
    empty line ends an invocation. The daemon reads stdin until it is closed,
    so run() blocks for as long as the daemon lives.
    """

    subcommand = ("daemon",)

    trace_folder = Option("--trace-folder")

    def __init__(self, trace_folder: Path | None = None):
        super().__init__()
        if trace_folder is not None:
            self.trace_folder(trace_folder)
