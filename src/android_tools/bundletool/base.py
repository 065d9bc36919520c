"""Shared base for bundletool command builders."""

from typing import ClassVar

from android_tools.core.builder import CommandBuilder
from android_tools.models.environment import ToolEnvironment
from android_tools.utils.android_sdk import get_bundletool_command


class BundletoolCommand(CommandBuilder):
    """A `java -jar <bundletool.jar> <command>` invocation.

    Flags take the `--flag=value` form bundletool documents.
    """

    tool: ClassVar[str] = "bundletool"

    def executable(self, env: ToolEnvironment) -> list[str]:
        return get_bundletool_command(env)
