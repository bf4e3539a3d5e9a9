"""Nodes and edges of a typed-dependency graph.

Nodes are immutable and compared by their integer ``id``, which is assigned
once when a structure is built. Two nodes with the same word and index are
different nodes unless they share an id; copy-nodes created while collapsing
conjoined prepositions get a fresh id and ``is_copy=True``.

Edges are mutable during processing: passes re-point the governor, relabel
the relation, or mark the edge removed. Removal is a state flag rather than
a sentinel relation, so a removed edge keeps its label for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from depcollapse.graph.relations import GrammaticalRelation


@dataclass(frozen=True)
class Node:
    """A word position in the sentence.

    Attributes:
        id: Stable identity; the only field used for equality and hashing.
        index: 1-based position in the sentence.
        word: Surface text.
        tag: Category of the immediate syntactic parent (pseudo POS tag).
        is_copy: True for nodes synthesized by conjoined-preposition collapse.
    """

    id: int
    index: int = field(compare=False)
    word: str = field(compare=False)
    tag: str = field(compare=False, default="")
    is_copy: bool = field(compare=False, default=False)

    def __str__(self) -> str:
        suffix = "'" if self.is_copy else ""
        return f"{self.word}-{self.index}{suffix}"


class EdgeState(Enum):
    ACTIVE = "active"
    REMOVED = "removed"


@dataclass(eq=False)
class Edge:
    """A typed dependency governor --relation--> dependent.

    Equality is identity: passes mutate edges in place and need to tell two
    equal-looking edges apart. Use ``key`` for value comparison.
    """

    governor: Node
    dependent: Node
    relation: GrammaticalRelation
    state: EdgeState = EdgeState.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.state is EdgeState.ACTIVE

    def remove(self) -> None:
        self.state = EdgeState.REMOVED

    def has(self, *relations: GrammaticalRelation) -> bool:
        """True if the edge is active and labelled with one of ``relations``."""
        return self.is_active and self.relation in relations

    @property
    def key(self) -> tuple[int, int, GrammaticalRelation]:
        return (self.governor.id, self.dependent.id, self.relation)

    @property
    def sort_key(self) -> tuple[int, bool, str, int]:
        return (
            self.dependent.index,
            self.dependent.is_copy,
            self.relation.name,
            self.governor.index,
        )

    def copy(self) -> "Edge":
        return Edge(self.governor, self.dependent, self.relation, self.state)

    def __str__(self) -> str:
        return f"{self.relation}({self.governor}, {self.dependent})"

    def __repr__(self) -> str:
        flag = "" if self.is_active else " [removed]"
        return f"<Edge {self}{flag}>"
