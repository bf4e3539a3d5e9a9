"""Graph data model: relation catalog, nodes, edges and the edge store."""

from depcollapse.graph.connectivity import ConnectivityReport, check_connectivity, find_roots
from depcollapse.graph.relations import (
    GrammaticalRelation,
    UnknownRelationError,
    conj,
    get_relation,
    list_relations,
    prep,
    prepc,
)
from depcollapse.graph.store import DependencyStore
from depcollapse.graph.types import Edge, EdgeState, Node

__all__ = [
    # Relations
    "GrammaticalRelation",
    "UnknownRelationError",
    "conj",
    "get_relation",
    "list_relations",
    "prep",
    "prepc",
    # Nodes & edges
    "Edge",
    "EdgeState",
    "Node",
    "DependencyStore",
    # Diagnostics
    "ConnectivityReport",
    "check_connectivity",
    "find_roots",
]
