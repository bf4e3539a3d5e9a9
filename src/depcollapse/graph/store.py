"""Mutable ordered edge collection shared by the collapsing passes."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import replace
from typing import Iterable, Iterator

from depcollapse.graph.relations import GrammaticalRelation
from depcollapse.graph.types import Edge, Node


class DependencyStore:
    """Ordered edges of one sentence, owned by a single conversion call.

    Passes iterate ``edges`` (or a snapshot of it), mutate edges in place and
    mark consumed edges removed. ``purge`` and ``commit`` rebuild the
    sequence between passes so each pass starts without removed edges.
    """

    def __init__(self, edges: Iterable[Edge] = (), next_id: int = 0) -> None:
        self.edges: list[Edge] = list(edges)
        self._next_id = max(
            next_id,
            1 + max(
                (n.id for e in self.edges for n in (e.governor, e.dependent)),
                default=0,
            ),
        )

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def add(self, governor: Node, dependent: Node, relation: GrammaticalRelation) -> Edge:
        edge = Edge(governor, dependent, relation)
        self.edges.append(edge)
        return edge

    def active(self) -> list[Edge]:
        return [e for e in self.edges if e.is_active]

    def governed_by(self) -> dict[Node, list[Edge]]:
        """Index governor -> active edges, each list in canonical edge order.

        The index is a snapshot: later re-pointing does not move an edge to
        another bucket.
        """
        index: dict[Node, list[Edge]] = defaultdict(list)
        for edge in self.edges:
            if edge.is_active:
                index[edge.governor].append(edge)
        for bucket in index.values():
            bucket.sort(key=lambda e: e.sort_key)
        return dict(index)

    def incoming(self) -> dict[Node, list[Edge]]:
        """Index dependent -> active edges, each list in canonical edge order."""
        index: dict[Node, list[Edge]] = defaultdict(list)
        for edge in self.edges:
            if edge.is_active:
                index[edge.dependent].append(edge)
        for bucket in index.values():
            bucket.sort(key=lambda e: e.sort_key)
        return dict(index)

    def purge(self) -> None:
        """Drop removed edges, keeping the order of the survivors."""
        self.edges = self.active()

    def commit(self, new_edges: Iterable[Edge], dedupe: bool = False) -> None:
        """Rebuild the sequence as ``new_edges`` followed by surviving edges.

        With ``dedupe`` an edge equal by ``key`` to one already kept is dropped.
        """
        rebuilt: list[Edge] = []
        seen: set[tuple] = set()
        for edge in [*new_edges, *self.edges]:
            if not edge.is_active:
                continue
            if dedupe:
                if edge.key in seen:
                    continue
                seen.add(edge.key)
            rebuilt.append(edge)
        self.edges = rebuilt

    def copy_node(self, node: Node) -> Node:
        """Allocate a copy-node sharing ``node``'s word, index and tag."""
        copy = replace(node, id=self._next_id, is_copy=True)
        self._next_id += 1
        return copy

    def snapshot(self) -> "DependencyStore":
        """Private copy: same (immutable) nodes, fresh edge objects."""
        return DependencyStore((e.copy() for e in self.edges), next_id=self._next_id)

    def sorted_edges(self) -> list[Edge]:
        return sorted(self.active(), key=lambda e: e.sort_key)
