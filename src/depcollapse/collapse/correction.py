"""Correct passive subjects and unrecognized possessive pronouns."""

from __future__ import annotations

import logging

from depcollapse.graph.relations import (
    AUX_PASSIVE_MODIFIER,
    CLAUSAL_PASSIVE_SUBJECT,
    CLAUSAL_SUBJECT,
    DEPENDENT,
    NOMINAL_PASSIVE_SUBJECT,
    NOMINAL_SUBJECT,
    POSSESSION_MODIFIER,
)
from depcollapse.graph.store import DependencyStore

logger = logging.getLogger(__name__)

POSSESSIVE_PRONOUN_TAGS = frozenset({"PRP$", "WP$"})


def correct_subj_pass_and_poss(store: DependencyStore) -> None:
    """Relabel subjects of verbs carrying an auxpass, and dep(x, his|whose).

    nsubj(eaten, cake) + auxpass(eaten, was) -> nsubjpass(eaten, cake)
    dep(car, his) with his/PRP$               -> poss(car, his)
    """
    passive_heads = {e.governor for e in store.edges if e.has(AUX_PASSIVE_MODIFIER)}

    for edge in store.edges:
        if not edge.is_active:
            continue
        if edge.relation == NOMINAL_SUBJECT and edge.governor in passive_heads:
            edge.relation = NOMINAL_PASSIVE_SUBJECT
            logger.debug("passive subject: %s", edge)
        elif edge.relation == CLAUSAL_SUBJECT and edge.governor in passive_heads:
            edge.relation = CLAUSAL_PASSIVE_SUBJECT
            logger.debug("passive clausal subject: %s", edge)
        elif edge.relation == DEPENDENT and edge.dependent.tag in POSSESSIVE_PRONOUN_TAGS:
            edge.relation = POSSESSION_MODIFIER
            logger.debug("possessive pronoun: %s", edge)
