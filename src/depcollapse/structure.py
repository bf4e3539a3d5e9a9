"""Grammatical structure of one sentence and the four dependency views.

A structure holds the token nodes and the basic (uncollapsed) edges as given
by the caller. Every view is computed on a private snapshot of those edges,
so views can be requested repeatedly and in any order:

    basic           correction only
    collapsed tree  correction, cleanup, multiword, preposition, conjunction
    collapsed       collapsed tree + referent substitution
    cc_processed    collapsed tree + conjunct propagation + referent substitution
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from depcollapse.collapse import (
    collapse_conj,
    collapse_flat_multiword_preps,
    collapse_prep_and_poss,
    collapse_referent,
    collapse_three_word_preps,
    collapse_two_word_preps,
    collapse_two_word_preps_shared_governor,
    correct_subj_pass_and_poss,
    erase_multi_conj,
    treat_cc,
)
from depcollapse.config import View, get_view
from depcollapse.graph.connectivity import ConnectivityReport, check_connectivity
from depcollapse.graph.relations import GrammaticalRelation, get_relation
from depcollapse.graph.store import DependencyStore
from depcollapse.graph.types import Edge, Node
from depcollapse.punctuation import WordFilter, punctuation_reject_filter

logger = logging.getLogger(__name__)

Pass = Callable[[DependencyStore], object]

COLLAPSED_TREE_PASSES: tuple[Pass, ...] = (
    correct_subj_pass_and_poss,
    erase_multi_conj,
    collapse_two_word_preps,
    collapse_flat_multiword_preps,
    collapse_two_word_preps_shared_governor,
    collapse_three_word_preps,
    collapse_prep_and_poss,
    collapse_conj,
)

VIEW_PASSES: dict[View, tuple[Pass, ...]] = {
    View.BASIC: (correct_subj_pass_and_poss,),
    View.COLLAPSED_TREE: COLLAPSED_TREE_PASSES,
    View.COLLAPSED: COLLAPSED_TREE_PASSES + (collapse_referent,),
    View.CC_PROCESSED: COLLAPSED_TREE_PASSES + (treat_cc, collapse_referent),
}


def run_passes(store: DependencyStore, passes: Iterable[Pass]) -> DependencyStore:
    """Apply ``passes`` in order, tracing the edge list after each at DEBUG."""
    for rewrite in passes:
        rewrite(store)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "after %s:\n%s",
                rewrite.__name__,
                "\n".join(str(e) for e in store.sorted_edges()),
            )
    return store


class GrammaticalStructure:
    """Tokens and basic typed dependencies of a single sentence.

    Args:
        tokens: Token nodes in sentence order.
        edges: Basic dependencies between ``tokens``.
        punct_filter: Edges whose dependent word is rejected are dropped.
    """

    def __init__(
        self,
        tokens: Sequence[Node],
        edges: Iterable[Edge],
        punct_filter: WordFilter = punctuation_reject_filter,
    ) -> None:
        self.tokens: tuple[Node, ...] = tuple(tokens)
        self._edges: tuple[Edge, ...] = tuple(
            e for e in edges if punct_filter(e.dependent.word)
        )
        self._next_id = 1 + max((n.id for n in self.tokens), default=0)

    @classmethod
    def from_triples(
        cls,
        tokens: Sequence[tuple[str, str]],
        triples: Iterable[tuple[str | GrammaticalRelation, int, int]],
        punct_filter: WordFilter = punctuation_reject_filter,
    ) -> "GrammaticalStructure":
        """Build from (word, tag) tokens and (relation, gov index, dep index) triples.

        Indices are 1-based; a governor index of 0 marks the root and yields
        no edge. Relation names are resolved against the catalog.

        Raises:
            UnknownRelationError: If a relation name is not in the catalog.
            ValueError: If an index is outside the sentence.
        """
        nodes = [
            Node(id=i, index=i, word=word, tag=tag)
            for i, (word, tag) in enumerate(tokens, start=1)
        ]
        edges = []
        for relation, gov, dep in triples:
            if not 0 <= gov <= len(nodes) or not 1 <= dep <= len(nodes):
                raise ValueError(
                    f"Index out of range in ({relation}, {gov}, {dep}) for {len(nodes)} tokens"
                )
            if gov == 0:
                continue
            if isinstance(relation, str):
                relation = get_relation(relation)
            edges.append(Edge(nodes[gov - 1], nodes[dep - 1], relation))
        return cls(nodes, edges, punct_filter)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return " ".join(f"{n.word}/{n.tag}" for n in self.tokens)

    def _snapshot(self) -> DependencyStore:
        return DependencyStore((e.copy() for e in self._edges), next_id=self._next_id)

    def dependencies(self, view: View | str = View.CC_PROCESSED) -> list[Edge]:
        """Compute one view: run its passes on a snapshot, then sort."""
        if not isinstance(view, View):
            view = get_view(view)
        store = run_passes(self._snapshot(), VIEW_PASSES[view])
        return store.sorted_edges()

    def typed_dependencies(self) -> list[Edge]:
        """Basic dependencies, a tree over the tokens."""
        return self.dependencies(View.BASIC)

    def typed_dependencies_collapsed(self) -> list[Edge]:
        return self.dependencies(View.COLLAPSED)

    def typed_dependencies_collapsed_tree(self) -> list[Edge]:
        """Collapsed dependencies without the referent step; stays a tree."""
        return self.dependencies(View.COLLAPSED_TREE)

    def typed_dependencies_cc_processed(self) -> list[Edge]:
        return self.dependencies(View.CC_PROCESSED)

    def connectivity(self, view: View | str = View.COLLAPSED) -> ConnectivityReport:
        return check_connectivity(self.dependencies(view))
