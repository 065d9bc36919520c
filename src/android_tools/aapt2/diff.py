"""`aapt2 diff`: print differences in resources of two APKs."""

from pathlib import Path

from android_tools.aapt2.base import Aapt2Command
from android_tools.core.builder import Positional


class Aapt2Diff(Aapt2Command):
    subcommand = ("diff",)

    input_apks = Positional()

    def __init__(self, input_apks: list[Path]):
        super().__init__()
        self.input_apks(input_apks)
