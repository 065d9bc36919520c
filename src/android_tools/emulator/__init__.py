"""Android Emulator."""

from android_tools.emulator.emulator import Emulator

__all__ = ["Emulator"]
