"""Diagnostic connectivity check for finished dependency lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from depcollapse.graph.types import Edge, Node


@dataclass(frozen=True)
class ConnectivityReport:
    """Outcome of a connectivity check.

    Attributes:
        connected: True when at most one governor lacks an incoming edge.
        roots: Indices of governors with no incoming edge. One of them is the
            real root; any others are the offending nodes.
    """

    connected: bool
    roots: frozenset[int] = field(default_factory=frozenset)


def find_roots(edges: Iterable[Edge]) -> list[Node]:
    """Governors that never appear as a dependent, in first-seen order."""
    edges = [e for e in edges if e.is_active]
    dependents = {e.dependent for e in edges}
    roots: list[Node] = []
    for edge in edges:
        if edge.governor not in dependents and edge.governor not in roots:
            roots.append(edge.governor)
    return roots


def check_connectivity(edges: Iterable[Edge]) -> ConnectivityReport:
    roots = find_roots(edges)
    return ConnectivityReport(
        connected=len(roots) <= 1,
        roots=frozenset(n.index for n in roots),
    )
