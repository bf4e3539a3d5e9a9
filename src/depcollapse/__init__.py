"""Collapse basic typed dependencies into collapsed and CC-processed views."""

from depcollapse.config import CollapseConfig, View, config_from_env, get_view
from depcollapse.graph import (
    ConnectivityReport,
    DependencyStore,
    Edge,
    GrammaticalRelation,
    Node,
    UnknownRelationError,
    check_connectivity,
    get_relation,
)
from depcollapse.io import ConllxFormatError, format_conllx, format_plain, parse_conllx, read_conllx
from depcollapse.protocol import DependencyParser, GraphRenderer, process_sentences
from depcollapse.structure import GrammaticalStructure

__all__ = [
    "GrammaticalStructure",
    "View",
    "get_view",
    "CollapseConfig",
    "config_from_env",
    # Graph
    "ConnectivityReport",
    "DependencyStore",
    "Edge",
    "GrammaticalRelation",
    "Node",
    "UnknownRelationError",
    "check_connectivity",
    "get_relation",
    # I/O
    "ConllxFormatError",
    "format_conllx",
    "format_plain",
    "parse_conllx",
    "read_conllx",
    # Capabilities
    "DependencyParser",
    "GraphRenderer",
    "process_sentences",
]
