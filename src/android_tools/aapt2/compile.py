"""`aapt2 compile`: compile resources into intermediate .flat files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from android_tools.aapt2.base import Aapt2Command
from android_tools.core.builder import Option, Positional, Switch
from android_tools.exceptions import CompiledResourcesNotFoundError
from android_tools.models.environment import ToolEnvironment


class ResourceInputs(Positional):
    """Input resources. Directories expand to their files, sorted."""

    def render(self, value: tuple[Any, ...]) -> list[str]:
        files: list[str] = []
        for item in value:
            path = Path(item)
            if path.is_dir():
                files.extend(str(p) for p in sorted(path.rglob("*")) if p.is_file())
            else:
                files.append(str(path))
        return files


class Aapt2Compile(Aapt2Command):
    """Compiles resources to a binary format optimized for Android.

    AAPT2 splits packaging into `compile` and `link`: only changed resources
    need recompiling before everything is linked into an APK.
    """

    subcommand = ("compile",)

    output = Option("-o", doc="Output path for the compiled resource(s)")
    dir = Option(
        "--dir",
        doc="Directory to scan for resources. Cannot be combined with input files",
    )
    zip = Option("--zip", doc="Zip file containing the res directory to scan")
    output_text_symbols = Option(
        "--output-text-symbols",
        doc="Generates a text file containing the resource symbols",
    )
    pseudo_localize = Switch(
        "--pseudo-localize", doc="Generate pseudo-localized versions of default strings"
    )
    no_crunch = Switch("--no-crunch", doc="Disables PNG processing")
    legacy = Switch(
        "--legacy", doc="Treat errors from earlier AAPT versions as warnings"
    )
    preserve_visibility_of_styleables = Switch("--preserve-visibility-of-styleables")
    visibility = Option("--visibility", doc="public, private or default")
    source_path = Option("--source-path")
    trace_folder = Option("--trace-folder")
    inputs = ResourceInputs()

    def __init__(self, compiled_res: Path, inputs: list[Path] | None = None):
        super().__init__()
        self.compiled_res = compiled_res
        self.output(compiled_res)
        if inputs:
            self.inputs(inputs)

    @classmethod
    def from_res_path(cls, res_path: Path, compiled_res: Path) -> Aapt2Compile:
        """Compile a single resource file or every file under a directory."""
        return cls(compiled_res, [res_path])

    @classmethod
    def from_res_dir(cls, res_dir: Path, compiled_res: Path) -> Aapt2Compile:
        return cls(compiled_res).dir(res_dir)

    @classmethod
    def from_res_zip(cls, res_zip: Path, compiled_res: Path) -> Aapt2Compile:
        return cls(compiled_res).zip(res_zip)

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Compile and return the compiled resources path.

        Raises:
            CompiledResourcesNotFoundError: If aapt2 exited cleanly but produced
                nothing at the output path.
        """
        self.execute(env, stream=stream)
        if not self.compiled_res.exists():
            raise CompiledResourcesNotFoundError(self.compiled_res)
        return self.compiled_res
