"""Tool discovery, process execution, configuration and console helpers."""
