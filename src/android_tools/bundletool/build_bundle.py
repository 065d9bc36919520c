"""`bundletool build-bundle`: assemble an .aab from module zips."""

from __future__ import annotations

from pathlib import Path

from android_tools.bundletool.base import BundletoolCommand
from android_tools.core.builder import ListOption, Option, Switch
from android_tools.models.environment import ToolEnvironment


class BuildBundle(BundletoolCommand):
    """Build an Android App Bundle.

    Module zips must contain resources in protobuf format
    (`aapt2 link --proto-format`). Sign the result with jarsigner; apksigner
    cannot sign app bundles.
    """

    subcommand = ("build-bundle",)

    modules = ListOption("--modules", equals=True, doc="Module ZIP files, comma-joined")
    output = Option("--output", equals=True, doc="Path of the output .aab file")
    overwrite = Switch("--overwrite")
    config = Option(
        "--config", equals=True, doc="BundleConfig JSON customizing the build"
    )
    metadata_file = Option(
        "--metadata-file",
        equals=True,
        doc="Metadata to package, as <target-bundle-path>:<local-file-path>",
    )

    def __init__(self, modules: list[Path], output: Path):
        super().__init__()
        self.output_path = output
        self.modules(modules)
        self.output(output)

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Build the bundle and return its path."""
        self.execute(env, stream=stream)
        return self.output_path
