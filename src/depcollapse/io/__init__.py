"""Readers and writers for dependency data."""

from depcollapse.io.conllx import ConllxFormatError, format_conllx, parse_conllx, read_conllx
from depcollapse.io.render import format_plain

__all__ = [
    "ConllxFormatError",
    "format_conllx",
    "format_plain",
    "parse_conllx",
    "read_conllx",
]
