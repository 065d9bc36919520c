"""`bundletool get-size total`."""

from pathlib import Path

from android_tools.bundletool.base import BundletoolCommand
from android_tools.core.builder import ListOption, Option, Switch


class GetSizeTotal(BundletoolCommand):
    """Estimate the over-the-wire download size of the APKs in an APK set.

    The result is printed as CSV on stdout (`.execute().output`).
    """

    subcommand = ("get-size", "total")

    apks = Option("--apks", equals=True)
    device_spec = Option("--device-spec", equals=True)
    dimensions = ListOption(
        "--dimensions", equals=True, doc="SDK, ABI, SCREEN_DENSITY, LANGUAGE or ALL"
    )
    instant = Switch("--instant")
    modules = ListOption("--modules", equals=True)

    def __init__(self, apks: Path):
        super().__init__()
        self.apks(apks)
