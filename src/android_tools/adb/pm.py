"""`adb shell pm`: package manager commands."""

from android_tools.adb.base import AdbCommand
from android_tools.core.builder import Option, Positional, Switch


class AdbShellPm(AdbCommand):
    """Call the package manager (pm) on the device.

    Pick one command switch, add options, then pass the command's
    arguments (package, permission, user id) through `arguments`.
    """

    subcommand = ("shell", "pm")

    list_permission_groups = Switch("list", "permission-groups")
    list_instrumentation = Switch("list", "instrumentation")
    list_features = Switch("list", "features")
    list_libraries = Switch("list", "libraries")
    list_users = Switch("list", "users")
    path = Switch("path", doc="Print the path to the APK of a package")
    uninstall = Switch("uninstall", doc="Remove a package from the system")
    clear = Switch("clear", doc="Delete all data associated with a package")
    enable = Switch("enable", doc="Enable the given package or component")
    disable = Switch("disable", doc="Disable the given package or component")
    disable_user = Switch("disable-user")
    grant = Switch("grant", doc="Grant a permission to an app")
    revoke = Switch("revoke", doc="Revoke a permission from an app")
    set_install_location = Option(
        "set-install-location", doc="Change the default install location"
    )
    get_install_location = Switch("get-install-location")
    set_permission_enforced = Switch("set-permission-enforced")
    trim_caches = Switch(
        "trim-caches", doc="Trim cache files to reach the given free space"
    )
    create_user = Switch("create-user", doc="Create a new user with the given name")
    remove_user = Switch("remove-user", doc="Remove the user with the given id")
    get_max_users = Switch("get-max-users")

    filepath = Switch("-f", doc="Show associated file")
    keep_data = Switch("-k", doc="Keep the data and cache directories on uninstall")
    fastdeploy = Switch("--fastdeploy")
    user = Option("--user", doc="User id to act on")
    arguments = Positional(doc="Command arguments")


class AdbShellPmInstall(AdbCommand):
    """`adb shell pm install [options] PATH`."""

    subcommand = ("shell", "pm", "install")

    reinstall = Switch("-r", doc="Reinstall an existing app, keeping its data")
    allow_test = Switch("-t", doc="Allow test APKs to be installed")
    installer = Option("-i", doc="Specify the installer package name")
    install_location = Option("--install-location", doc="InstallLocation (0, 1 or 2)")
    internal = Switch("-f", doc="Install package on the internal system memory")
    downgrade = Switch("-d", doc="Allow version code downgrade")
    grant_all = Switch("-g", doc="Grant all permissions listed in the app manifest")
    fastdeploy = Switch("--fastdeploy", doc="Quickly update an installed package")
    incremental = Switch("--incremental")
    no_incremental = Switch("--no-incremental")
    package_path = Positional(doc="Path of the APK on the device")

    def __init__(self, package_path: str | None = None):
        super().__init__()
        if package_path is not None:
            self.package_path(package_path)


class AdbShellPmListPackages(AdbCommand):
    """`adb shell pm list packages [options] [FILTER]`."""

    subcommand = ("shell", "pm", "list", "packages")

    show_file = Switch("-f", doc="See their associated file")
    disabled = Switch("-d", doc="Filter to only show disabled packages")
    enabled = Switch("-e", doc="Filter to only show enabled packages")
    system = Switch("-s", doc="Filter to only show system packages")
    third_party = Switch("-3", doc="Filter to only show third party packages")
    show_installer = Switch("-i", doc="See the installer for the packages")
    include_uninstalled = Switch("-u", doc="Also include uninstalled packages")
    user = Option("--user", doc="The user space to query")
    name_filter = Positional(doc="Only packages whose name contains this text")


class AdbShellPmListPermissions(AdbCommand):
    """`adb shell pm list permissions [options] [GROUP]`."""

    subcommand = ("shell", "pm", "list", "permissions")

    by_group = Switch("-g", doc="Organize by group")
    full = Switch("-f", doc="Print all information")
    summary = Switch("-s", doc="Short summary")
    dangerous = Switch("-d", doc="Only list dangerous permissions")
    user_visible = Switch("-u", doc="Only list permissions users will see")
    group = Positional()


class AdbShellPmListInstrumentation(AdbCommand):
    """`adb shell pm list instrumentation [-f] [TARGET_PACKAGE]`."""

    subcommand = ("shell", "pm", "list", "instrumentation")

    show_file = Switch("-f", doc="List the APK file for the test package")
    target_package = Positional()
