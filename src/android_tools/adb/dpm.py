"""`adb shell dpm`: device policy manager commands."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Positional, Switch


class AdbShellDpm(AdbCommand):
    """Call the device policy manager (dpm) to test device management apps."""

    subcommand = ("shell", "dpm")

    set_active_admin = Switch("set-active-admin", doc="Set component as active admin")
    set_profile_owner = Switch("set-profile-owner")
    set_device_owner = Switch("set-device-owner")
    remove_active_admin = Switch("remove-active-admin", doc="Disable an active admin")
    clear_freeze_period_record = Switch("clear-freeze-period-record")
    force_network_logs = Switch("force-network-logs")
    force_security_logs = Switch("force-security-logs")

    name = Option("--name", doc="Name of the organization (profile/device owner)")
    user = Option("--user", doc="Target user id, or 'current'")
    component = Positional(doc="Admin component (package/.Receiver)")
