"""`adb shell` with common one-shot shell commands."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Positional, Switch


class AdbShell(AdbCommand):
    """Run a command in the device shell.

    The typed setters cover frequently used commands; `shell_command` appends an
    arbitrary command line, one argument per item.
    """

    subcommand = ("shell",)

    pwd = Switch("pwd", doc="Print current working directory")
    netstat = Switch("netstat", doc="List TCP connectivity")
    service_list = Switch("service", "list", doc="List all services")
    ps = Switch("ps", doc="Print process status")
    wm_size = Option(
        "wm", "size", doc="Display or override the screen resolution (WxH)"
    )
    ls = Switch("ls", doc="List directory contents")
    ls_size = Switch("ls", "-s", doc="Print size of each file")
    ls_recursive = Switch("ls", "-R", doc="List subdirectories recursively")
    install = Option("install", doc="Install app from a device path")
    install_replace = Option("install", "-r", doc="Reinstall app from a device path")
    uninstall = Option("uninstall", doc="Remove the app")
    permission_groups = Switch(
        "pm", "list", "permission-groups", doc="List permission groups"
    )
    list_permissions = Switch(
        "pm", "list", "permissions", "-g", "-r", doc="List permissions by group"
    )
    dump = Option("dumpsys", "package", doc="List info on one package")
    path = Option("pm", "path", doc="Print the path to the APK of a package")
    shell_command = Positional(doc="Arbitrary shell command, one argument per item")
