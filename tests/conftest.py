"""Shared test fixtures."""
import pytest

from depcollapse.graph import DependencyStore, Edge, Node, get_relation


def _build_store(tokens, triples):
    nodes = [Node(id=i, index=i, word=w, tag=t) for i, (w, t) in enumerate(tokens, start=1)]
    edges = [Edge(nodes[g - 1], nodes[d - 1], get_relation(r)) for r, g, d in triples]
    return DependencyStore(edges, next_id=len(nodes) + 1)


@pytest.fixture
def make_store():
    """Build a store from (word, tag) tokens and (relation, gov, dep) triples."""
    return _build_store


@pytest.fixture
def lines():
    """Render an edge list as relation(gov, dep) strings."""
    return lambda edges: [str(e) for e in edges]


@pytest.fixture
def passive_sentence():
    # The cake was eaten by the dog
    tokens = [
        ("The", "DT"), ("cake", "NN"), ("was", "VBD"), ("eaten", "VBN"),
        ("by", "IN"), ("the", "DT"), ("dog", "NN"),
    ]
    triples = [
        ("det", 2, 1), ("nsubj", 4, 2), ("auxpass", 4, 3), ("prep", 4, 5),
        ("det", 7, 6), ("pobj", 5, 7),
    ]
    return tokens, triples


@pytest.fixture
def conjoined_preps_sentence():
    # He jumped over the fence and through the hoop
    tokens = [
        ("He", "PRP"), ("jumped", "VBD"), ("over", "IN"), ("the", "DT"), ("fence", "NN"),
        ("and", "CC"), ("through", "IN"), ("the", "DT"), ("hoop", "NN"),
    ]
    triples = [
        ("nsubj", 2, 1), ("prep", 2, 3), ("pobj", 3, 5), ("det", 5, 4),
        ("cc", 3, 6), ("conj", 3, 7), ("pobj", 7, 9), ("det", 9, 8),
    ]
    return tokens, triples


@pytest.fixture
def sample_conllx():
    return (
        "1\tThe\t_\tDT\tDT\t_\t2\tdet\t_\t_\n"
        "2\tcake\t_\tNN\tNN\t_\t4\tnsubjpass\t_\t_\n"
        "3\twas\t_\tVBD\tVBD\t_\t4\tauxpass\t_\t_\n"
        "4\teaten\t_\tVBN\tVBN\t_\t0\tnull\t_\t_\n"
        "5\tby\t_\tIN\tIN\t_\t4\tprep\t_\t_\n"
        "6\tthe\t_\tDT\tDT\t_\t7\tdet\t_\t_\n"
        "7\tdog\t_\tNN\tNN\t_\t5\tpobj\t_\t_\n"
        "\n"
        "1\tBill\t_\tNNP\tNNP\t_\t2\tnsubj\t_\t_\n"
        "2\teats\t_\tVBZ\tVBZ\t_\t0\tnull\t_\t_\n"
        "3\tapples\t_\tNNS\tNNS\t_\t2\tdobj\t_\t_\n"
        "4\tand\t_\tCC\tCC\t_\t2\tcc\t_\t_\n"
        "5\tdrinks\t_\tVBZ\tVBZ\t_\t2\tconj\t_\t_\n"
        "6\tmilk\t_\tNN\tNN\t_\t5\tdobj\t_\t_\n"
        "\n"
    )
