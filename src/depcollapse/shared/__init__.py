"""Shared run infrastructure."""

from depcollapse.shared.logger import RunLogger, remove_stdlib_bridge, stdlib_level

__all__ = ["RunLogger", "remove_stdlib_bridge", "stdlib_level"]
