"""End-to-end view properties over a small hand-built corpus."""
from collections import Counter

import pytest

from depcollapse.config import View
from depcollapse.structure import GrammaticalStructure

CORPUS = {
    "passive": (
        [
            ("The", "DT"), ("cake", "NN"), ("was", "VBD"), ("eaten", "VBN"),
            ("by", "IN"), ("the", "DT"), ("dog", "NN"),
        ],
        [
            ("det", 2, 1), ("nsubj", 4, 2), ("auxpass", 4, 3), ("prep", 4, 5),
            ("det", 7, 6), ("pobj", 5, 7),
        ],
    ),
    "because_of": (
        [("He", "PRP"), ("left", "VBD"), ("because", "IN"), ("of", "IN"), ("rain", "NN")],
        [("nsubj", 2, 1), ("prep", 2, 3), ("dep", 3, 4), ("pobj", 4, 5)],
    ),
    "in_front_of": (
        [
            ("He", "PRP"), ("stood", "VBD"), ("in", "IN"), ("front", "NN"), ("of", "IN"),
            ("the", "DT"), ("house", "NN"),
        ],
        [
            ("nsubj", 2, 1), ("prep", 2, 3), ("pobj", 3, 4), ("prep", 4, 5),
            ("det", 7, 6), ("pobj", 5, 7),
        ],
    ),
    "same_preps": (
        [
            ("He", "PRP"), ("flew", "VBD"), ("to", "TO"), ("Greece", "NNP"),
            ("and", "CC"), ("to", "TO"), ("Serbia", "NNP"),
        ],
        [
            ("nsubj", 2, 1), ("prep", 2, 3), ("pobj", 3, 4), ("cc", 3, 5),
            ("conj", 3, 6), ("pobj", 6, 7),
        ],
    ),
    "different_preps": (
        [
            ("He", "PRP"), ("jumped", "VBD"), ("over", "IN"), ("the", "DT"), ("fence", "NN"),
            ("and", "CC"), ("through", "IN"), ("the", "DT"), ("hoop", "NN"),
        ],
        [
            ("nsubj", 2, 1), ("prep", 2, 3), ("pobj", 3, 5), ("det", 5, 4),
            ("cc", 3, 6), ("conj", 3, 7), ("pobj", 7, 9), ("det", 9, 8),
        ],
    ),
    "as_well_as": (
        [("bread", "NN"), ("as", "RB"), ("well", "RB"), ("as", "IN"), ("cheese", "NN")],
        [("cc", 1, 3), ("dep", 3, 2), ("dep", 3, 4), ("conj", 1, 5)],
    ),
}


@pytest.fixture(params=sorted(CORPUS))
def structure(request):
    return GrammaticalStructure.from_triples(*CORPUS[request.param])


@pytest.mark.parametrize("view", [View.BASIC, View.COLLAPSED_TREE])
def test_tree_views_complete(structure, view):
    """Every non-root node of a connected tree view has exactly one head."""
    edges = structure.dependencies(view)
    assert structure.connectivity(view).connected
    incoming = Counter(e.dependent for e in edges)
    assert all(count == 1 for count in incoming.values())
    assert len(edges) == len(incoming)


@pytest.mark.parametrize("view", list(View))
def test_views_sorted(structure, view):
    edges = structure.dependencies(view)
    assert edges == sorted(edges, key=lambda e: e.sort_key)


@pytest.mark.parametrize("view", list(View))
def test_views_deterministic(structure, view):
    first = [str(e) for e in structure.dependencies(view)]
    assert [str(e) for e in structure.dependencies(view)] == first


def test_multiword_scenarios():
    gs = GrammaticalStructure.from_triples(*CORPUS["in_front_of"])
    assert [str(e) for e in gs.typed_dependencies_collapsed()] == [
        "nsubj(stood-2, He-1)",
        "det(house-7, the-6)",
        "prep_in_front_of(stood-2, house-7)",
    ]


def test_as_well_as_becomes_conj_and():
    gs = GrammaticalStructure.from_triples(*CORPUS["as_well_as"])
    assert [str(e) for e in gs.typed_dependencies_collapsed()] == ["conj_and(bread-1, cheese-5)"]


def test_cc_processed_distributes_preposition():
    gs = GrammaticalStructure.from_triples(*CORPUS["same_preps"])
    assert [str(e) for e in gs.typed_dependencies_cc_processed()] == [
        "nsubj(flew-2, He-1)",
        "prep_to(flew-2, Greece-4)",
        "conj_and(Greece-4, Serbia-7)",
        "prep_to(flew-2, Serbia-7)",
    ]


def test_cc_processed_copy_node_gets_subject():
    gs = GrammaticalStructure.from_triples(*CORPUS["different_preps"])
    edges = [str(e) for e in gs.typed_dependencies_cc_processed()]
    assert "nsubj(jumped-2', He-1)" in edges
    assert gs.connectivity(View.CC_PROCESSED).connected
