"""Collapse multiword prepositions ("because of", "in front of") into one relation.

Every collapser walks a fixed catalog. For each entry it looks for the chain
of edges linking the literal component words, the edge attaching the chain to
an outside governor, and the object or clausal complement of the preposition.
Only when all of them are found does it fire:

    prep(drew, because) + dep(because, of) + pobj(of, rain)
        -> prep_because_of(drew, rain)

Component words must be adjacent in the sentence (index distance 1, or 2
for the skipped middle word of a flat three-word preposition). Each entry
fires at most once per call and the first match wins.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from depcollapse.graph.relations import (
    ADJECTIVAL_MODIFIER,
    ADVERBIAL_MODIFIER,
    DEPENDENT,
    PHRASAL_VERB_PARTICLE,
    PREPOSITIONAL_COMPLEMENT,
    PREPOSITIONAL_MODIFIER,
    PREPOSITIONAL_OBJECT,
    TEMPORAL_MODIFIER,
    prep,
    prepc,
)
from depcollapse.graph.store import DependencyStore
from depcollapse.graph.types import Edge, Node

logger = logging.getLogger(__name__)

# Kept in alphabetical order.
MULTIWORD_PREPS: tuple[tuple[str, str], ...] = (
    ("according", "to"), ("across", "from"), ("ahead", "of"), ("along", "with"),
    ("alongside", "of"), ("apart", "from"), ("as", "for"), ("as", "from"),
    ("as", "of"), ("as", "per"), ("as", "to"), ("aside", "from"),
    ("away", "from"), ("based", "on"), ("because", "of"), ("close", "by"),
    ("close", "to"), ("contrary", "to"), ("compared", "to"), ("compared", "with"),
    ("due", "to"), ("depending", "on"), ("except", "for"), ("exclusive", "of"),
    ("far", "from"), ("followed", "by"), ("inside", "of"), ("instead", "of"),
    ("irrespective", "of"), ("next", "to"), ("near", "to"), ("off", "of"),
    ("out", "of"), ("outside", "of"), ("owing", "to"), ("preliminary", "to"),
    ("preparatory", "to"), ("previous", "to"), ("prior", "to"), ("pursuant", "to"),
    ("regardless", "of"), ("subsequent", "to"), ("such", "as"), ("thanks", "to"),
    ("together", "with"),
)

THREEWORD_PREPS: tuple[tuple[str, str, str], ...] = (
    ("by", "means", "of"), ("in", "accordance", "with"), ("in", "addition", "to"),
    ("in", "case", "of"), ("in", "front", "of"), ("in", "lieu", "of"),
    ("in", "place", "of"), ("in", "spite", "of"), ("on", "account", "of"),
    ("on", "behalf", "of"), ("on", "top", "of"), ("with", "regard", "to"),
    ("with", "respect", "to"),
)

COMPLETIONS = (PREPOSITIONAL_OBJECT, PREPOSITIONAL_COMPLEMENT)


def _is(node: Node, word: str) -> bool:
    return node.word.lower() == word


def _first(store: DependencyStore, pred: Callable[[Edge], bool]) -> Edge | None:
    return next((e for e in store.edges if e.is_active and pred(e)), None)


def _completion(
    store: DependencyStore,
    heads: Iterable[Node],
    links: tuple[Edge, ...],
    components: set[Node],
) -> Edge | None:
    """Object or complement below one of ``heads``; lowest dependent index wins.

    A chain link, or any edge onto a component word, is never the completion.
    """
    heads = set(heads)
    candidates = [
        e
        for e in store.edges
        if e.has(*COMPLETIONS)
        and e.governor in heads
        and e.dependent not in components
        and not any(e is link for link in links)
    ]
    return min(candidates, key=lambda e: e.dependent.index, default=None)


def _fire(
    store: DependencyStore,
    words: tuple[str, ...],
    attachment: Edge,
    links: tuple[Edge, ...],
    completion: Edge,
    components: set[Node],
) -> None:
    governor = attachment.governor
    target = completion.dependent
    joined = "_".join(words)
    if completion.relation == PREPOSITIONAL_COMPLEMENT:
        relation = prepc(joined)
    else:
        relation = prep(joined)
    collapsed = Edge(governor, target, relation)

    for edge in (attachment, *links, completion):
        edge.remove()

    # promote orphans; an NP-TMP buried in the PP ("during the same period
    # last year") stays with the object
    for edge in store.edges:
        if edge.is_active and edge.governor in components:
            edge.governor = target if edge.relation == TEMPORAL_MODIFIER else governor

    logger.debug("multiword prep: %s", collapsed)
    store.commit([collapsed], dedupe=True)


def _collapse_adjacent_pair(
    store: DependencyStore, words: tuple[str, str], head_word: str, tail_word: str
) -> bool:
    """X(gov, head) + Y(head, tail) + pobj|pcomp(head|tail, compl)."""
    link = _first(
        store,
        lambda e: _is(e.governor, head_word)
        and _is(e.dependent, tail_word)
        and abs(e.governor.index - e.dependent.index) == 1,
    )
    if link is None:
        return False
    head, tail = link.governor, link.dependent

    attachment = _first(
        store,
        lambda e: e.dependent == head
        and e.relation in (PREPOSITIONAL_MODIFIER, ADVERBIAL_MODIFIER, ADJECTIVAL_MODIFIER, DEPENDENT),
    )
    completion = _completion(store, (head, tail), (link,), {head, tail})
    if attachment is None or completion is None:
        return False

    _fire(store, words, attachment, (link,), completion, {head, tail})
    return True


def collapse_two_word_preps(store: DependencyStore) -> int:
    """Two-word prepositions analysed as a head word with a dependent word.

    Tries both orders: the first word governing the second, and the reverse.
    """
    fired = 0
    for words in MULTIWORD_PREPS:
        w0, w1 = words
        fired += _collapse_adjacent_pair(store, words, w0, w1)
        fired += _collapse_adjacent_pair(store, words, w1, w0)
    return fired


def collapse_flat_multiword_preps(store: DependencyStore) -> int:
    """Flat PP annotation: prep(gov, of) + dep(of, because) + pobj(of, rain)."""
    fired = 0
    for words in MULTIWORD_PREPS:
        w0, w1 = words
        link = _first(
            store,
            lambda e: _is(e.governor, w1)
            and _is(e.dependent, w0)
            and abs(e.governor.index - e.dependent.index) == 1,
        )
        if link is None:
            continue
        head = link.governor
        attachment = _first(
            store, lambda e: e.dependent == head and e.relation == PREPOSITIONAL_MODIFIER
        )
        components = {head, link.dependent}
        completion = _completion(store, (head,), (link,), components)
        if attachment is None or completion is None:
            continue
        _fire(store, words, attachment, (link,), completion, components)
        fired += 1
    return fired


def collapse_two_word_preps_shared_governor(store: DependencyStore) -> int:
    """Both words hang off the same governor: advmod|prt(gov, w0) + prep(gov, w1)."""
    fired = 0
    for words in MULTIWORD_PREPS:
        w0, w1 = words
        first = _first(
            store,
            lambda e: _is(e.dependent, w0)
            and e.relation in (PHRASAL_VERB_PARTICLE, ADVERBIAL_MODIFIER, DEPENDENT),
        )
        if first is None:
            continue
        governor = first.governor
        second = _first(
            store,
            lambda e: _is(e.dependent, w1)
            and e.governor == governor
            and e.relation == PREPOSITIONAL_MODIFIER
            and abs(e.dependent.index - first.dependent.index) == 1,
        )
        if second is None:
            continue
        components = {first.dependent, second.dependent}
        completion = _completion(store, (second.dependent,), (first,), components)
        if completion is None:
            continue
        _fire(store, words, second, (first,), completion, components)
        fired += 1
    return fired


def _collapse_three_words(store: DependencyStore, words: tuple[str, str, str], flat: bool) -> bool:
    w0, w1, w2 = words
    link1 = _first(
        store,
        lambda e: _is(e.governor, w0)
        and _is(e.dependent, w1)
        and abs(e.governor.index - e.dependent.index) == 1,
    )
    if link1 is None:
        return False
    first, middle = link1.governor, link1.dependent

    # chained: X(w1, w2) one apart; flat: X(w0, w2) two apart
    link2_head = first if flat else middle
    distance = 2 if flat else 1
    link2 = _first(
        store,
        lambda e: e.governor == link2_head
        and _is(e.dependent, w2)
        and abs(e.governor.index - e.dependent.index) == distance,
    )
    if link2 is None:
        return False
    last = link2.dependent

    attachment = _first(
        store, lambda e: e.dependent == first and e.relation == PREPOSITIONAL_MODIFIER
    )
    components = {first, middle, last}
    completion = _completion(store, (first,) if flat else (last,), (link1, link2), components)
    if attachment is None or completion is None:
        return False

    _fire(store, words, attachment, (link1, link2), completion, components)
    return True


def collapse_three_word_preps(store: DependencyStore) -> int:
    """Three-word prepositions, first as a chain, then as flat annotation.

    chained: prep(gov, in) + X(in, front) + X(front, of) + pobj(of, compl)
    flat:    prep(gov, in) + X(in, front) + X(in, of)    + pobj(in, compl)
    """
    fired = 0
    for flat in (False, True):
        for words in THREEWORD_PREPS:
            fired += _collapse_three_words(store, words, flat)
    return fired
