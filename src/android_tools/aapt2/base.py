"""Shared base for aapt2 subcommand builders."""

from typing import ClassVar

from android_tools.core.builder import CommandBuilder, Switch
from android_tools.models.environment import ToolEnvironment
from android_tools.utils.android_sdk import get_aapt2


class Aapt2Command(CommandBuilder):
    """An `aapt2 <subcommand>` invocation."""

    tool: ClassVar[str] = "aapt2"

    verbose = Switch("-v", doc="Enables verbose logging")
    help = Switch("-h", doc="Displays the help menu")

    def executable(self, env: ToolEnvironment) -> list[str]:
        return [str(get_aapt2(env))]
