"""Android Asset Packaging Tool 2.0 (AAPT2).

https://developer.android.com/studio/command-line/aapt2

AAPT2 divides packaging into two steps: `compile` turns each resource into an
intermediate .flat file, and `link` merges them into an APK. Only changed
resources need recompiling.
"""

from pathlib import Path

from android_tools.aapt2.base import Aapt2Command
from android_tools.aapt2.compile import Aapt2Compile
from android_tools.aapt2.convert import Aapt2Convert
from android_tools.aapt2.daemon import Aapt2Daemon
from android_tools.aapt2.diff import Aapt2Diff
from android_tools.aapt2.dump import Aapt2Dump
from android_tools.aapt2.link import Aapt2Link
from android_tools.aapt2.optimize import Aapt2Optimize
from android_tools.aapt2.version import Aapt2Version
from android_tools.models.options import Aapt2DumpSubcommand, Aapt2OutputFormat


class Aapt2:
    """Entry point for aapt2 subcommand builders."""

    def compile_incremental(self, res_path: Path, compiled_res: Path) -> Aapt2Compile:
        """Compile a resource file, or every file under a directory."""
        return Aapt2Compile.from_res_path(res_path, compiled_res)

    def compile_dir(self, res_dir: Path, compiled_res: Path) -> Aapt2Compile:
        """Compile a whole res directory (`--dir`)."""
        return Aapt2Compile.from_res_dir(res_dir, compiled_res)

    def compile_zip(self, res_zip: Path, compiled_res: Path) -> Aapt2Compile:
        """Compile resources from a zip (`--zip`)."""
        return Aapt2Compile.from_res_zip(res_zip, compiled_res)

    def link_inputs(
        self, inputs: list[Path], output_apk: Path, manifest: Path
    ) -> Aapt2Link:
        """Link the given compiled resources into an APK."""
        return Aapt2Link(output_apk, manifest, inputs)

    def link_compiled_res(
        self, compiled_res: Path | None, output_apk: Path, manifest: Path
    ) -> Aapt2Link:
        """Link every .flat file of a compiled resources directory into an APK."""
        return Aapt2Link.from_compiled_res(compiled_res, output_apk, manifest)

    def dump(self, subcommand: Aapt2DumpSubcommand, apk: Path) -> Aapt2Dump:
        return Aapt2Dump(subcommand, apk)

    def diff(self, apks: list[Path]) -> Aapt2Diff:
        return Aapt2Diff(apks)

    def optimize(self, output_apk: Path, input_apk: Path) -> Aapt2Optimize:
        return Aapt2Optimize(output_apk, input_apk)

    def convert(
        self,
        output: Path,
        input_apk: Path,
        output_format: Aapt2OutputFormat | None = None,
    ) -> Aapt2Convert:
        return Aapt2Convert(output, input_apk, output_format)

    def version(self) -> Aapt2Version:
        return Aapt2Version()

    def daemon(self, trace_folder: Path | None = None) -> Aapt2Daemon:
        return Aapt2Daemon(trace_folder)


__all__ = [
    "Aapt2",
    "Aapt2Command",
    "Aapt2Compile",
    "Aapt2Convert",
    "Aapt2Daemon",
    "Aapt2Diff",
    "Aapt2Dump",
    "Aapt2Link",
    "Aapt2Optimize",
    "Aapt2Version",
]
