"""bundletool: build and deploy Android App Bundles.

https://developer.android.com/studio/command-line/bundletool

bundletool ships as a JAR and runs through `java -jar`. Point BUNDLETOOL_PATH
at it, or drop bundletool-all-<version>.jar into your home directory
(version from BUNDLETOOL_VERSION, 1.8.2 by default).
"""

from pathlib import Path

from android_tools.bundletool.base import BundletoolCommand
from android_tools.bundletool.build_apks import BuildApks
from android_tools.bundletool.build_bundle import BuildBundle
from android_tools.bundletool.extract_apks import ExtractApks
from android_tools.bundletool.get_device_spec import GetDeviceSpec
from android_tools.bundletool.get_size_total import GetSizeTotal
from android_tools.bundletool.install_apks import InstallApks


class Bundletool:
    """Entry point for bundletool command builders."""

    def build_apks(self, bundle: Path, output: Path) -> BuildApks:
        """Generate an APK set from an app bundle."""
        return BuildApks(bundle, output)

    def build_bundle(self, modules: list[Path], output: Path) -> BuildBundle:
        """Build an .aab from protobuf-format module zips."""
        return BuildBundle(modules, output)

    def extract_apks(
        self, apks: Path, output_dir: Path, device_spec: Path
    ) -> ExtractApks:
        return ExtractApks(apks, output_dir, device_spec)

    def get_size_total(self, apks: Path) -> GetSizeTotal:
        return GetSizeTotal(apks)

    def install_apks(self, apks: Path) -> InstallApks:
        return InstallApks(apks)

    def get_device_spec(self, output: Path) -> GetDeviceSpec:
        return GetDeviceSpec(output)


__all__ = [
    "BuildApks",
    "BuildBundle",
    "Bundletool",
    "BundletoolCommand",
    "ExtractApks",
    "GetDeviceSpec",
    "GetSizeTotal",
    "InstallApks",
]
