import pytest

from depcollapse.graph.relations import (
    DIRECT_OBJECT,
    NOMINAL_PASSIVE_SUBJECT,
    NOMINAL_SUBJECT,
    UnknownRelationError,
    conj,
    get_relation,
    is_specific_conj,
    is_subject,
    list_relations,
    prep,
    prepc,
)


class TestCatalog:
    def test_catalog_names_resolve(self):
        for name in list_relations():
            assert get_relation(name).name == name

    def test_catalog_has_core_relations(self):
        names = list_relations()
        for name in ("nsubj", "nsubjpass", "dobj", "pobj", "prep", "cc", "conj", "ref", "rel", "agent"):
            assert name in names

    def test_parent_hierarchy(self):
        assert get_relation("nsubjpass").parent == "nsubj"
        assert get_relation("auxpass").parent == "aux"
        assert get_relation("dep").parent is None

    def test_unknown_relation_raises(self):
        with pytest.raises(UnknownRelationError):
            get_relation("bogus")

    def test_unknown_relation_is_key_error(self):
        with pytest.raises(KeyError):
            get_relation("KILL")

    def test_family_prefix_alone_is_catalog_entry(self):
        assert get_relation("prep").specific is None

    def test_empty_family_parameter_rejected(self):
        with pytest.raises(UnknownRelationError):
            get_relation("prep_")


class TestFamilies:
    def test_prep_name(self):
        assert str(prep("because_of")) == "prep_because_of"

    def test_prepc_name(self):
        assert str(prepc("of")) == "prepc_of"

    def test_conj_lowercases(self):
        assert str(conj("And")) == "conj_and"

    def test_parsed_family_equals_factory(self):
        assert get_relation("prep_in_front_of") == prep("in_front_of")
        assert get_relation("conj_or") == conj("or")

    def test_family_parent(self):
        assert prepc("of").parent == "prep"
        assert conj("and").parent == "conj"

    def test_specific_conj(self):
        assert is_specific_conj(conj("and"))
        assert not is_specific_conj(get_relation("conj"))
        assert not is_specific_conj(prep("of"))


class TestSubjects:
    def test_nominal_subjects(self):
        assert is_subject(NOMINAL_SUBJECT)
        assert is_subject(NOMINAL_PASSIVE_SUBJECT)

    def test_clausal_subjects(self):
        assert is_subject(get_relation("csubj"))
        assert is_subject(get_relation("csubjpass"))

    def test_non_subjects(self):
        assert not is_subject(DIRECT_OBJECT)
        assert not is_subject(get_relation("xsubj"))
        assert not is_subject(get_relation("subj"))
