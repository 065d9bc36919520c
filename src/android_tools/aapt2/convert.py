"""`aapt2 convert`: convert an APK between binary and proto formats."""

from __future__ import annotations

from pathlib import Path

from android_tools.aapt2.base import Aapt2Command
from android_tools.core.builder import Option, Positional, Switch
from android_tools.models.environment import ToolEnvironment
from android_tools.models.options import Aapt2OutputFormat


class Aapt2Convert(Aapt2Command):
    subcommand = ("convert",)

    output = Option("-o", doc="Output path")
    output_format = Option("--output-format", doc="proto or binary")
    enable_sparse_encoding = Switch("--enable-sparse-encoding")
    keep_raw_values = Switch("--keep-raw-values")
    input_apk = Positional()

    def __init__(
        self,
        output: Path,
        input_apk: Path,
        output_format: Aapt2OutputFormat | None = None,
    ):
        super().__init__()
        self.output_path = output
        self.output(output)
        self.input_apk(input_apk)
        if output_format is not None:
            self.output_format(output_format)

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Convert and return the output path."""
        self.execute(env, stream=stream)
        return self.output_path
