"""Capability interfaces for the parts of the pipeline that live elsewhere.

Parsing a raw sentence into basic dependencies and drawing a dependency
graph are not done here; callers inject objects satisfying these protocols.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Protocol, runtime_checkable

from depcollapse.config import View, get_view
from depcollapse.graph.types import Edge
from depcollapse.structure import GrammaticalStructure

logger = logging.getLogger(__name__)


@runtime_checkable
class DependencyParser(Protocol):
    """Protocol for parsers producing basic dependencies."""

    def parse(self, sentence: str) -> GrammaticalStructure:
        """Parse one sentence.

        Args:
            sentence: Raw sentence text.

        Returns:
            Structure holding the tokens and basic dependencies.
        """
        ...


@runtime_checkable
class GraphRenderer(Protocol):
    """Protocol for dependency graph viewers."""

    def render(self, edges: list[Edge], title: str) -> None:
        """Display a finished dependency list under ``title``."""
        ...


def process_sentences(
    parser: DependencyParser,
    sentences: Iterable[str],
    view: View | str = View.CC_PROCESSED,
    renderer: GraphRenderer | None = None,
) -> Iterator[tuple[GrammaticalStructure, list[Edge]]]:
    """Parse each sentence and compute ``view``, rendering it if asked."""
    if not isinstance(view, View):
        view = get_view(view)
    for sentence in sentences:
        structure = parser.parse(sentence)
        edges = structure.dependencies(view)
        logger.debug("%s: %d edge(s) for %r", view.value, len(edges), sentence)
        if renderer is not None:
            renderer.render(edges, view.heading)
        yield structure, edges
