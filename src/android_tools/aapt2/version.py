"""`aapt2 version`."""

from android_tools.aapt2.base import Aapt2Command


class Aapt2Version(Aapt2Command):
    """Prints the version of aapt2 on stdout."""

    subcommand = ("version",)
