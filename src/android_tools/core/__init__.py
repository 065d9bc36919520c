"""Shared builder machinery."""
