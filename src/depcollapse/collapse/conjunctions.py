"""Rewrite generic conjuncts into coordinator-specific relations.

    cc(elected, and) + conj(elected, re-elected) -> conj_and(elected, re-elected)
"""

from __future__ import annotations

import logging

from depcollapse.graph.relations import CONJUNCT, COORDINATION, GrammaticalRelation, conj
from depcollapse.graph.store import DependencyStore
from depcollapse.graph.types import Node

logger = logging.getLogger(__name__)

NEGATIVE_COORDINATORS = frozenset({"not", "instead", "rather"})
ADDITIVE_COORDINATORS = frozenset({"to", "also"})


def conj_value(word: str) -> GrammaticalRelation:
    """Normalize a coordinator word into its conj_ relation.

    Heads of multiword coordinators are folded: "but not", "instead of",
    "rather than" -> negcc; "as well as", "not to mention", "but also" -> and.
    """
    coordinator = word.lower()
    if coordinator in NEGATIVE_COORDINATORS:
        coordinator = "negcc"
    elif coordinator in ADDITIVE_COORDINATORS or "well" in coordinator:
        coordinator = "and"
    return conj(coordinator)


def collapse_conj(store: DependencyStore) -> None:
    collapsed: set[Node] = set()

    for td in list(store.edges):
        if not td.has(COORDINATION):
            continue
        governor = td.governor
        relation = conj_value(td.dependent.word)
        found = False
        # a later cc on the same governor takes over for the conjuncts after it
        for td1 in store.edges:
            if td1.governor != governor:
                continue
            if td1.has(CONJUNCT):
                logger.debug("changing %s to %s", td1, relation)
                td1.relation = relation
                found = True
            elif td1.has(COORDINATION):
                relation = conj_value(td1.dependent.word)
        if found:
            collapsed.add(governor)

    # a clause-initial "and" with no conjunct keeps its cc
    for td in store.edges:
        if td.has(COORDINATION) and td.governor in collapsed:
            td.remove()
    store.purge()
