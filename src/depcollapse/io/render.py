"""Plain-text rendering of dependency lists."""

from __future__ import annotations

from typing import Iterable

from depcollapse.graph.types import Edge


def format_plain(edges: Iterable[Edge]) -> str:
    """One ``relation(gov-i, dep-j)`` per line, followed by a blank line."""
    return "".join(f"{edge}\n" for edge in edges) + "\n"
