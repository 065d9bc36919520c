"""`aapt2 dump`: print information about a linked APK."""

from pathlib import Path

from android_tools.aapt2.base import Aapt2Command
from android_tools.core.builder import Option, Positional, Switch
from android_tools.models.options import Aapt2DumpSubcommand


class Aapt2Dump(Aapt2Command):
    """Prints resources and manifest information from an APK.

    The result is the raw ProcessResult; its stdout is the dump.
    """

    no_values = Switch(
        "--no-values", doc="Suppresses output of values when displaying resources"
    )
    file = Option("--file", doc="Dump only the given file from the APK")
    apk = Positional()

    def __init__(self, subcommand: Aapt2DumpSubcommand, apk: Path):
        super().__init__()
        # The dump kind is part of the subcommand: `aapt2 dump badging`.
        self.subcommand = ("dump", str(subcommand))
        self.apk(apk)
