"""Typed command-line builders for the Android SDK tools."""

__version__ = "0.1.0"
