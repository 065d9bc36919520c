"""`adb shell screenrecord`."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Positional, Switch


class AdbShellScreenrecord(AdbCommand):
    """Record the device display to an MPEG-4 file on the device."""

    subcommand = ("shell", "screenrecord")

    help = Switch("--help", doc="Display command syntax and options")
    rotate = Switch("--rotate", doc="Rotate the output 90 degrees")
    verbose = Switch(
        "--verbose", doc="Display log information on the command-line screen"
    )
    size = Option("--size", doc="Video size, e.g. 1280x720")
    bit_rate = Option("--bit-rate", doc="Video bit rate in bits per second")
    time_limit = Option("--time-limit", doc="Maximum recording time in seconds")
    bugreport = Switch(
        "--bugreport", doc="Add additional information, such as a timestamp overlay"
    )
    filename = Positional(doc="Output path on the device")

    def __init__(self, filename: str | None = None):
        super().__init__()
        if filename is not None:
            self.filename(filename)
