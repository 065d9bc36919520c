"""Android Debug Bridge (adb).

https://developer.android.com/studio/command-line/adb
"""

from android_tools.adb.am import (
    AdbShellAm,
    AdbShellAmInstrument,
    AdbShellAmSetDebugApp,
    AdbShellAmStart,
)
from android_tools.adb.base import AdbCommand
from android_tools.adb.dpm import AdbShellDpm
from android_tools.adb.dumpsys import AdbShellDumpsys
from android_tools.adb.pm import (
    AdbShellPm,
    AdbShellPmInstall,
    AdbShellPmListInstrumentation,
    AdbShellPmListPackages,
    AdbShellPmListPermissions,
)
from android_tools.adb.push import AdbPull, AdbPush
from android_tools.adb.screenrecord import AdbShellScreenrecord
from android_tools.adb.shell import AdbShell
from android_tools.adb.tools import AdbTools


class Adb:
    """Entry point for adb command builders."""

    def tools(self) -> AdbTools:
        return AdbTools()

    def shell(self) -> AdbShell:
        return AdbShell()

    def push(self, local: list[str], remote: str) -> AdbPush:
        return AdbPush(local, remote)

    def pull(self, remote: list[str], local: str | None = None) -> AdbPull:
        return AdbPull(remote, local)

    def am(self) -> AdbShellAm:
        return AdbShellAm()

    def am_start(self, component: str | None = None) -> AdbShellAmStart:
        return AdbShellAmStart(component)

    def am_instrument(self, component: str | None = None) -> AdbShellAmInstrument:
        return AdbShellAmInstrument(component)

    def am_set_debug_app(self, package: str | None = None) -> AdbShellAmSetDebugApp:
        return AdbShellAmSetDebugApp(package)

    def pm(self) -> AdbShellPm:
        return AdbShellPm()

    def pm_install(self, package_path: str | None = None) -> AdbShellPmInstall:
        return AdbShellPmInstall(package_path)

    def pm_list_packages(self) -> AdbShellPmListPackages:
        return AdbShellPmListPackages()

    def pm_list_permissions(self) -> AdbShellPmListPermissions:
        return AdbShellPmListPermissions()

    def pm_list_instrumentation(self) -> AdbShellPmListInstrumentation:
        return AdbShellPmListInstrumentation()

    def dpm(self) -> AdbShellDpm:
        return AdbShellDpm()

    def dumpsys(self) -> AdbShellDumpsys:
        return AdbShellDumpsys()

    def screenrecord(self, filename: str | None = None) -> AdbShellScreenrecord:
        return AdbShellScreenrecord(filename)


__all__ = [
    "Adb",
    "AdbCommand",
    "AdbPull",
    "AdbPush",
    "AdbShell",
    "AdbShellAm",
    "AdbShellAmInstrument",
    "AdbShellAmSetDebugApp",
    "AdbShellAmStart",
    "AdbShellDpm",
    "AdbShellDumpsys",
    "AdbShellPm",
    "AdbShellPmInstall",
    "AdbShellPmListInstrumentation",
    "AdbShellPmListPackages",
    "AdbShellPmListPermissions",
    "AdbShellScreenrecord",
    "AdbTools",
]
