from depcollapse.graph import DependencyStore, Edge, EdgeState, Node, get_relation


def _nodes():
    return [Node(id=i, index=i, word=w, tag="NN") for i, w in enumerate(["a", "b", "c"], start=1)]


class TestNode:
    def test_equality_by_id(self):
        assert Node(id=1, index=1, word="a") == Node(id=1, index=5, word="z")

    def test_same_word_different_id(self):
        assert Node(id=1, index=1, word="a") != Node(id=2, index=1, word="a")

    def test_str(self):
        assert str(Node(id=1, index=3, word="cat")) == "cat-3"

    def test_copy_str(self):
        assert str(Node(id=9, index=3, word="cat", is_copy=True)) == "cat-3'"


class TestEdge:
    def test_remove_sets_state(self):
        a, b, _ = _nodes()
        edge = Edge(a, b, get_relation("dep"))
        edge.remove()
        assert edge.state is EdgeState.REMOVED
        assert not edge.is_active

    def test_has_ignores_removed(self):
        a, b, _ = _nodes()
        dep = get_relation("dep")
        edge = Edge(a, b, dep)
        assert edge.has(dep)
        edge.remove()
        assert not edge.has(dep)

    def test_str(self):
        a, b, _ = _nodes()
        assert str(Edge(a, b, get_relation("det"))) == "det(a-1, b-2)"


class TestDependencyStore:
    def test_purge_keeps_order(self):
        a, b, c = _nodes()
        dep = get_relation("dep")
        store = DependencyStore([Edge(a, b, dep), Edge(a, c, dep), Edge(b, c, dep)])
        store.edges[1].remove()
        store.purge()
        assert [str(e) for e in store] == ["dep(a-1, b-2)", "dep(b-2, c-3)"]

    def test_commit_puts_new_edges_first(self):
        a, b, c = _nodes()
        store = DependencyStore([Edge(a, b, get_relation("dep"))])
        store.commit([Edge(a, c, get_relation("det"))])
        assert [str(e) for e in store] == ["det(a-1, c-3)", "dep(a-1, b-2)"]

    def test_commit_dedupe(self):
        a, b, _ = _nodes()
        dep = get_relation("dep")
        store = DependencyStore([Edge(a, b, dep)])
        store.commit([Edge(a, b, dep)], dedupe=True)
        assert len(store) == 1

    def test_commit_without_dedupe_keeps_duplicates(self):
        a, b, _ = _nodes()
        dep = get_relation("dep")
        store = DependencyStore([Edge(a, b, dep)])
        store.commit([Edge(a, b, dep)])
        assert len(store) == 2

    def test_copy_node_fresh_id(self):
        a, b, c = _nodes()
        store = DependencyStore([Edge(a, b, get_relation("dep"))], next_id=4)
        copy = store.copy_node(a)
        assert copy.is_copy
        assert copy.index == a.index
        assert copy.word == a.word
        assert copy.id not in {a.id, b.id, c.id}
        assert copy != a

    def test_copy_nodes_are_distinct(self):
        a, b, _ = _nodes()
        store = DependencyStore([Edge(a, b, get_relation("dep"))])
        assert store.copy_node(a) != store.copy_node(a)

    def test_snapshot_is_independent(self):
        a, b, _ = _nodes()
        store = DependencyStore([Edge(a, b, get_relation("dep"))])
        snap = store.snapshot()
        snap.edges[0].relation = get_relation("det")
        assert str(store.edges[0]) == "dep(a-1, b-2)"

    def test_governed_by_sorted(self):
        a, b, c = _nodes()
        store = DependencyStore([Edge(a, c, get_relation("det")), Edge(a, b, get_relation("amod"))])
        index = store.governed_by()
        assert [e.dependent.word for e in index[a]] == ["b", "c"]

    def test_sorted_edges_order(self):
        a, b, c = _nodes()
        store = DependencyStore([
            Edge(c, b, get_relation("nsubj")),
            Edge(a, b, get_relation("nsubj")),
            Edge(a, b, get_relation("dobj")),
        ])
        assert [str(e) for e in store.sorted_edges()] == [
            "dobj(a-1, b-2)",
            "nsubj(a-1, b-2)",
            "nsubj(c-3, b-2)",
        ]
