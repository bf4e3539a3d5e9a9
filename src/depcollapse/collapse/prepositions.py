"""Collapse preposition + object pairs and erase childless possessives.

    prep(cat, in) + pobj(in, hat)           -> prep_in(cat, hat)
    prep(heard, of) + pcomp(of, attacking)  -> prepc_of(heard, attacking)
    prep(eaten, by) + pobj(by, dog), auxpass(eaten, was)
                                            -> agent(eaten, dog)
    possessive(Montezuma, 's)               -> erased

Prepositions conjoined with each other are handled first, because a
preposition that heads a coordination must not be collapsed on its own:

    flew to Greece and to Serbia
        -> prep_to(flew, Greece), conj_and(Greece, Serbia)
    jumped over the fence and through the hoop
        -> prep_over(jumped, fence), conj_and(jumped, jumped'),
           prep_through(jumped', hoop)

where jumped' is a copy-node of jumped.
"""

from __future__ import annotations

import logging

from depcollapse.collapse.conjunctions import conj_value
from depcollapse.graph.relations import (
    AGENT,
    AUX_PASSIVE_MODIFIER,
    CONJUNCT,
    COORDINATION,
    DEPENDENT,
    PARTICIPIAL_MODIFIER,
    POSSESSIVE_MODIFIER,
    PREPOSITIONAL_COMPLEMENT,
    PREPOSITIONAL_MODIFIER,
    PREPOSITIONAL_OBJECT,
    RELATIVE,
    GrammaticalRelation,
    prep,
    prepc,
)
from depcollapse.graph.store import DependencyStore
from depcollapse.graph.types import Edge, Node

logger = logging.getLogger(__name__)

PREPOSITION_TAGS = frozenset({"IN", "TO"})
# VBG covers participial prepositions such as "including" and "following"
PREPOSITION_HEAD_TAGS = frozenset({"IN", "TO", "VBG"})
NON_OBJECT_TAGS = frozenset({"RB", "IN", "TO"})


class _Context:
    """Indexes built once per call, before any edge is mutated."""

    def __init__(self, store: DependencyStore) -> None:
        self.store = store
        self.by_governor = store.governed_by()
        self.partmod_dependents = {
            e.dependent for e in store.edges if e.has(PARTICIPIAL_MODIFIER)
        }
        self.new_edges: list[Edge] = []

    def daughters(self, node: Node) -> list[Edge]:
        return self.by_governor.get(node, [])

    def is_agent(self, td1: Edge) -> bool:
        """A "by" PP whose governor is passive (auxpass) or a partmod dependent."""
        if td1.dependent.word.lower() != "by":
            return False
        head = td1.governor
        if any(e.has(AUX_PASSIVE_MODIFIER) for e in self.daughters(head)):
            return True
        return head in self.partmod_dependents

    def emit(self, governor: Node, dependent: Node, relation: GrammaticalRelation) -> None:
        edge = Edge(governor, dependent, relation)
        logger.debug("prep collapse adding: %s", edge)
        self.new_edges.append(edge)


def _collapsed_relation(td1: Edge, word: str, pobj: bool) -> GrammaticalRelation:
    if td1.relation == RELATIVE:
        return RELATIVE
    return prep(word) if pobj else prepc(word)


def _is_preposition(node: Node) -> bool:
    return node.tag in PREPOSITION_TAGS


def _promote(daughters: list[Edge], governor: Node) -> None:
    # a stray IN daughter was most likely a "dep"; make it a "prep"
    for edge in daughters:
        if not edge.is_active:
            continue
        if edge.dependent.tag == "IN":
            edge.relation = PREPOSITIONAL_MODIFIER
        edge.governor = governor


def _collapse_conjoined(ctx: _Context, td1: Edge) -> None:
    possibles = ctx.daughters(td1.dependent)
    if not possibles:
        return

    prep_dep: Edge | None = None
    cc_dep: Edge | None = None
    conj_dep: Edge | None = None
    prep2_dep: Edge | None = None
    prep_other_dep: Edge | None = None
    other_dtrs: list[Edge] = []
    pobj = True

    # conj(prep, prep); there may be several, the last one is used
    for td2 in possibles:
        if not td2.has(CONJUNCT) or not _is_preposition(td2.dependent):
            continue
        same = td2.dependent.word == td1.dependent.word
        conj_dep = td2
        for td3 in ctx.daughters(td2.dependent):
            takes_object = (
                td3.has(PREPOSITIONAL_OBJECT, PREPOSITIONAL_COMPLEMENT)
                and not _is_preposition(td3.dependent)
            )
            if same and takes_object and prep2_dep is None:
                prep2_dep = td3
            elif not same and takes_object and prep_other_dep is None:
                prep_other_dep = td3
            else:
                other_dtrs.append(td3)
                continue
            if td3.relation == PREPOSITIONAL_COMPLEMENT:
                pobj = False

    if conj_dep is None:
        return

    # the cc has to precede the second preposition
    limit = conj_dep.dependent.index
    for td2 in possibles:
        if td2.has(COORDINATION) and td2.dependent.index < limit:
            cc_dep = td2
        elif (
            td1.relation in (PREPOSITIONAL_MODIFIER, RELATIVE)
            and td2.has(DEPENDENT, PREPOSITIONAL_OBJECT, PREPOSITIONAL_COMPLEMENT)
            and td1.dependent.tag in PREPOSITION_HEAD_TAGS
            and prep_dep is None
            and td2.dependent.tag not in NON_OBJECT_TAGS
        ):
            prep_dep = td2
            if td2.relation == PREPOSITIONAL_COMPLEMENT:
                pobj = False
        elif td2 is not conj_dep:
            other_dtrs.append(td2)

    if prep_dep is None or cc_dep is None:
        return

    governor = td1.governor
    first = AGENT if ctx.is_agent(td1) else _collapsed_relation(td1, td1.dependent.word.lower(), pobj)
    coordinator = conj_value(cc_dep.dependent.word)

    if prep2_dep is not None:
        # parallel PPs with the same preposition: flew to Greece and to Serbia
        ctx.emit(governor, prep_dep.dependent, first)
        ctx.emit(prep_dep.dependent, prep2_dep.dependent, coordinator)
        for edge in (td1, prep_dep, cc_dep, conj_dep, prep2_dep):
            edge.remove()
        _promote(other_dtrs, governor)
        # some daughters may already have moved; only re-point those still
        # hanging off the preposition
        for td2 in possibles:
            if td2.is_active and td2.governor == td1.dependent:
                td2.governor = governor
        return

    if prep_other_dep is None:
        # "flies to and from Serbia": both prepositions share the object
        prep_other_dep = Edge(conj_dep.dependent, prep_dep.dependent, prep_dep.relation)

    # different prepositions: the second PP hangs off a copy of the governor
    copy = ctx.store.copy_node(governor)
    second_word = prep_other_dep.governor.word.lower()
    ctx.emit(governor, prep_dep.dependent, first)
    ctx.emit(governor, copy, coordinator)
    ctx.emit(copy, prep_other_dep.dependent, _collapsed_relation(td1, second_word, pobj))
    for edge in (td1, prep_dep, cc_dep, conj_dep, prep_other_dep):
        edge.remove()
    _promote(other_dtrs, governor)
    for td2 in possibles:
        if td2.is_active:
            td2.governor = governor


def _is_conj_with_no_prep(node: Node, edges: list[Edge]) -> bool:
    """True if ``node`` governs a conj whose dependent is not a preposition."""
    return any(
        e.governor == node and e.has(CONJUNCT) and not _is_preposition(e.dependent)
        for e in edges
    )


def _collapse_single(ctx: _Context, td1: Edge) -> None:
    possibles = ctx.daughters(td1.dependent)
    if not possibles:
        return

    for td2 in possibles:
        if td2.has(COORDINATION, CONJUNCT):
            continue
        if not (
            td1.has(PREPOSITIONAL_MODIFIER, RELATIVE)
            and td2.has(PREPOSITIONAL_OBJECT, PREPOSITIONAL_COMPLEMENT)
            and td1.dependent.tag in PREPOSITION_HEAD_TAGS
            and td2.dependent.tag not in NON_OBJECT_TAGS
            # a preposition conjoined with a non-preposition would leave
            # the conjunct disconnected
            and not _is_conj_with_no_prep(td2.governor, possibles)
        ):
            continue
        pobj = td2.relation != PREPOSITIONAL_COMPLEMENT
        if ctx.is_agent(td1):
            relation = AGENT
        else:
            relation = _collapsed_relation(td1, td1.dependent.word.lower(), pobj)
        ctx.emit(td1.governor, td2.dependent, relation)
        td1.remove()
        td2.remove()

    # dep(drew, on) + dep(on, book) + dep(on, right): once the first two
    # collapse, right must move up to drew
    if not td1.is_active:
        for td2 in possibles:
            if td2.is_active:
                td2.governor = td1.governor


def _erase_possessives(store: DependencyStore) -> None:
    governors = {e.governor for e in store.edges if e.is_active}
    for edge in store.edges:
        if edge.has(POSSESSIVE_MODIFIER) and edge.dependent not in governors:
            logger.debug("erasing possessive: %s", edge)
            edge.remove()


def collapse_prep_and_poss(store: DependencyStore) -> None:
    ctx = _Context(store)
    edges = list(store.edges)

    for td1 in edges:
        if td1.is_active:
            _collapse_conjoined(ctx, td1)

    for td1 in edges:
        if td1.is_active:
            _collapse_single(ctx, td1)

    _erase_possessives(store)
    store.commit(ctx.new_edges)
