"""`bundletool extract-apks`."""

from __future__ import annotations

from pathlib import Path

from android_tools.bundletool.base import BundletoolCommand
from android_tools.core.builder import ListOption, Option, Switch
from android_tools.models.environment import ToolEnvironment


class ExtractApks(BundletoolCommand):
    """Extract the APKs matching a device spec from an existing APK set."""

    subcommand = ("extract-apks",)

    apks = Option("--apks", equals=True)
    output_dir = Option("--output-dir", equals=True)
    device_spec = Option("--device-spec", equals=True)
    modules = ListOption(
        "--modules", equals=True, doc="Modules to extract, comma-joined"
    )
    instant = Switch(
        "--instant", doc="Extract instant APKs instead of installable ones"
    )

    def __init__(self, apks: Path, output_dir: Path, device_spec: Path):
        super().__init__()
        self.output_dir_path = output_dir
        self.apks(apks)
        self.output_dir(output_dir)
        self.device_spec(device_spec)

    def run(self, env: ToolEnvironment | None = None, *, stream: bool = False) -> Path:
        """Extract the APKs and return the output directory."""
        self.execute(env, stream=stream)
        return self.output_dir_path
