"""`aapt2 optimize`: resource optimizations on an APK."""

from __future__ import annotations

from pathlib import Path

from android_tools.aapt2.base import Aapt2Command
from android_tools.core.builder import ListOption, Option, Positional, Repeated, Switch
from android_tools.models.environment import ToolEnvironment


class Aapt2Optimize(Aapt2Command):
    """Optimizes an APK: density stripping, sparse encoding, name collapsing."""

    subcommand = ("optimize",)

    output = Option("-o", doc="Path to the output APK")
    output_dir = Option("-d", doc="Path to the output directory (for splits)")
    config = ListOption("-c", doc="Configurations to include in the output")
    resources_config_path = Option("--resources-config-path")
    target_densities = ListOption("--target-densities")
    split = Repeated("--split")
    keep_artifacts = ListOption("--keep-artifacts")
    enable_sparse_encoding = Switch("--enable-sparse-encoding")
    collapse_resource_names = Switch("--collapse-resource-names")
    shorten_resource_paths = Switch("--shorten-resource-paths")
    resource_path_shortening_map = Option("--resource-path-shortening-map")
    input_apk = Positional()

    def __init__(self, output_apk: Path, input_apk: Path):
        super().__init__()
        self.output_apk = output_apk
        self.output(output_apk)
        self.input_apk(input_apk)

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Optimize and return the output APK path."""
        self.execute(env, stream=stream)
        return self.output_apk
