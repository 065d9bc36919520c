"""`adb push` and `adb pull` file transfer commands."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Positional, Switch


class AdbPush(AdbCommand):
    """Copy local files/directories to the device: `adb push LOCAL... REMOTE`."""

    subcommand = ("push",)

    sync = Switch(
        "--sync", doc="Only push files that are newer on the host than the device"
    )
    dry_run = Switch(
        "-n", doc="Dry run: push files to device without storing to the filesystem"
    )
    compression = Option(
        "-z", doc="Enable compression with a specified algorithm (any, none, brotli)"
    )
    disable_compression = Switch("-Z", doc="Disable compression")
    paths = Positional(doc="Local sources followed by the remote destination")

    def __init__(self, local: list[str] | None = None, remote: str | None = None):
        super().__init__()
        if bool(local) != bool(remote):
            raise ValueError("adb push needs both local sources and a remote path")
        if local and remote:
            self.paths([*local, remote])


class AdbPull(AdbCommand):
    """Copy files/dirs from the device: `adb pull REMOTE... LOCAL`."""

    subcommand = ("pull",)

    preserve = Switch("-a", doc="Preserve file timestamp and mode")
    compression = Option(
        "-z", doc="Enable compression with a specified algorithm (any, none, brotli)"
    )
    disable_compression = Switch("-Z", doc="Disable compression")
    paths = Positional(doc="Remote sources followed by the local destination")

    def __init__(self, remote: list[str] | None = None, local: str | None = None):
        super().__init__()
        if local and not remote:
            raise ValueError("adb pull needs at least one remote path")
        if remote:
            self.paths([*remote, local] if local else remote)
