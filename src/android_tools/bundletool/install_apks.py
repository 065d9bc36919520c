"""`bundletool install-apks`."""

from pathlib import Path

from android_tools.bundletool.base import BundletoolCommand
from android_tools.core.builder import ListOption, Option, Switch


class InstallApks(BundletoolCommand):
    """Deploy an APK set to a connected device."""

    subcommand = ("install-apks",)

    apks = Option("--apks", equals=True)
    device_id = Option("--device-id", equals=True)
    modules = ListOption("--modules", equals=True)
    allow_downgrade = Switch("--allow-downgrade")
    allow_test_only = Switch("--allow-test-only")

    def __init__(self, apks: Path):
        super().__init__()
        self.apks(apks)
