"""Top-level adb commands and global options."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Positional, Switch


class AdbTools(AdbCommand):
    """Global adb options plus the host-side commands (devices, connect, ...).

    Global options always render before the command word, as adb requires.
    """

    listen_all = Switch(
        "-a",
        position="leading",
        doc="Listen on all network interfaces, not just localhost",
    )
    usb = Switch("-d", position="leading", doc="Use USB device (error if multiple)")
    tcp = Switch("-e", position="leading", doc="Use TCP/IP device (error if multiple)")
    host = Option(
        "-H", position="leading", doc="Name of adb server host [default=localhost]"
    )
    port = Option("-P", position="leading", doc="Port of adb server [default=5037]")
    listen = Option(
        "-L",
        position="leading",
        doc="Listen on given socket for adb server [default=tcp:localhost:5037]",
    )

    devices = Switch("devices", doc="List connected devices")
    devices_long = Switch(
        "devices", "-l", doc="List connected devices (-l for long output)"
    )
    install = Option(
        "install", doc="Push a single package to the device and install it"
    )
    forward = Positional(
        "forward", position="option", doc="Forward socket connections: LOCAL REMOTE"
    )
    connect = Option("connect", doc="Connect to a device via TCP/IP: HOST[:PORT]")
    disconnect = Option("disconnect", doc="Disconnect from given TCP/IP device")
    kill_server = Switch("kill-server", doc="Kill the server if it is running")
    start_server = Switch("start-server", doc="Ensure that there is a server running")
    tcpip = Option("tcpip", doc="Restart adbd listening on TCP on PORT")
    usb_mode = Switch("usb", doc="Restart adbd listening on USB")
    help = Switch("--help", doc="Show this help message")
    version = Switch("--version", doc="Show version number")
