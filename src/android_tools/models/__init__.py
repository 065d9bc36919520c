"""Pydantic models and option enums."""
