"""`adb shell dumpsys`: system service diagnostics."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Positional, Switch


class AdbShellDumpsys(AdbCommand):
    """Dump system service state, or fake battery readings for testing."""

    subcommand = ("shell", "dumpsys")

    activity = Switch("activity", doc="Dump the activity manager state")
    iphonesubinfo = Switch("iphonesubinfo", doc="Dump phone subscriber info")
    battery_level = Option("battery", "set", "level", doc="Fake battery level (0-100)")
    battery_status = Option("battery", "set", "status", doc="Fake battery status code")
    battery_usb = Option("battery", "set", "usb", doc="Fake USB power state (0 or 1)")
    battery_reset = Switch("battery", "reset", doc="Stop faking battery readings")
    service = Positional(doc="Service name and its arguments")
