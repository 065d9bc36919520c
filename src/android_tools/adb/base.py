"""Shared base for adb command builders."""

from typing import ClassVar

from android_tools.core.builder import CommandBuilder, Option
from android_tools.models.environment import ToolEnvironment
from android_tools.utils.android_sdk import get_adb


class AdbCommand(CommandBuilder):
    """An `adb [-s SERIAL] <command>` invocation."""

    tool: ClassVar[str] = "adb"

    serial = Option(
        "-s",
        position="leading",
        doc="Use device with given serial (overrides $ANDROID_SERIAL)",
    )

    def executable(self, env: ToolEnvironment) -> list[str]:
        return [str(get_adb(env))]
