"""Closed catalog of English grammatical relations.

Every relation carries a canonical short name (used for matching and for the
CoNLL-X interchange format) and the short name of its parent in the relation
hierarchy. Three parametrized families sit on top of the closed catalog:

    prep_<word[_word...]>   collapsed preposition + object
    prepc_<word[_word...]>  collapsed preposition + clausal complement
    conj_<coordinator>      collapsed coordination

The catalog is built once at import time and never mutated afterwards, so it
can be shared by any number of concurrent conversions.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


class UnknownRelationError(KeyError):
    """Raised when a short name is neither in the catalog nor a known family."""


@dataclass(frozen=True)
class GrammaticalRelation:
    """A relation label: catalog entry plus optional family parameter.

    Attributes:
        short_name: Canonical short name of the base relation (e.g. "prep").
        long_name: Human-readable name.
        parent: Short name of the parent relation, None for the hierarchy root.
        specific: Family parameter ("of", "because_of", "and"), None otherwise.
    """

    short_name: str
    long_name: str
    parent: str | None = None
    specific: str | None = None

    def __str__(self) -> str:
        if self.specific is None:
            return self.short_name
        return f"{self.short_name}_{self.specific}"

    @property
    def name(self) -> str:
        """Canonical name; also the sort order of relations."""
        return str(self)


# (short name, long name, parent)
_CATALOG_ROWS: tuple[tuple[str, str, str | None], ...] = (
    ("root", "root", None),
    ("dep", "dependent", None),
    ("aux", "auxiliary", "dep"),
    ("auxpass", "passive auxiliary", "aux"),
    ("cop", "copula", "aux"),
    ("conj", "conj_collapsed", "dep"),
    ("cc", "coordination", "dep"),
    ("punct", "punctuation", "dep"),
    ("arg", "argument", "dep"),
    ("subj", "subject", "arg"),
    ("nsubj", "nominal subject", "subj"),
    ("nsubjpass", "nominal passive subject", "nsubj"),
    ("csubj", "clausal subject", "subj"),
    ("csubjpass", "clausal passive subject", "csubj"),
    ("comp", "complement", "arg"),
    ("obj", "object", "comp"),
    ("dobj", "direct object", "obj"),
    ("iobj", "indirect object", "obj"),
    ("pobj", "prep_collapsed object", "obj"),
    ("pcomp", "prepositional complement", "comp"),
    ("attr", "attributive", "comp"),
    ("ccomp", "clausal complement", "comp"),
    ("xcomp", "xclausal complement", "comp"),
    ("complm", "complementizer", "comp"),
    ("mark", "marker", "comp"),
    ("rel", "relative", "comp"),
    ("acomp", "adjectival complement", "comp"),
    ("agent", "agent", "dep"),
    ("ref", "referent", "dep"),
    ("expl", "expletive", "dep"),
    ("mod", "modifier", "dep"),
    ("advcl", "adverbial clause modifier", "mod"),
    ("purpcl", "purpose clause modifier", "mod"),
    ("tmod", "temporal modifier", "mod"),
    ("rcmod", "relative clause modifier", "mod"),
    ("amod", "adjectival modifier", "mod"),
    ("infmod", "infinitival modifier", "mod"),
    ("partmod", "participial modifier", "mod"),
    ("num", "numeric modifier", "mod"),
    ("number", "element of compound number", "mod"),
    ("appos", "appositional modifier", "mod"),
    ("nn", "nn modifier", "mod"),
    ("abbrev", "abbreviation modifier", "mod"),
    ("advmod", "adverbial modifier", "mod"),
    ("neg", "negation modifier", "advmod"),
    ("npadvmod", "noun phrase adverbial modifier", "mod"),
    ("measure", "measure-phrase", "mod"),
    ("det", "determiner", "mod"),
    ("predet", "predeterminer", "mod"),
    ("preconj", "preconj", "mod"),
    ("poss", "possession modifier", "mod"),
    ("possessive", "possessive modifier", "mod"),
    ("prep", "prepositional modifier", "mod"),
    ("prt", "phrasal verb particle", "mod"),
    ("quantmod", "quantifier modifier", "mod"),
    ("mwe", "multi-word expression", "mod"),
    ("parataxis", "parataxis", "dep"),
    ("sdep", "semantic dependent", "dep"),
    ("xsubj", "controlling subject", "sdep"),
)

RELATIONS: MappingProxyType[str, GrammaticalRelation] = MappingProxyType({
    short: GrammaticalRelation(short, long_name, parent)
    for short, long_name, parent in _CATALOG_ROWS
})

# Families keyed by their prefix. The first part of the short name before the
# underscore selects the family; the rest is the parameter.
_FAMILIES: dict[str, tuple[str, str]] = {
    "prep": ("prep_collapsed", "prep"),
    "prepc": ("prepc_collapsed", "prep"),
    "conj": ("conj_collapsed", "conj"),
}

ROOT = RELATIONS["root"]
DEPENDENT = RELATIONS["dep"]
AUX_PASSIVE_MODIFIER = RELATIONS["auxpass"]
CONJUNCT = RELATIONS["conj"]
COORDINATION = RELATIONS["cc"]
PUNCTUATION = RELATIONS["punct"]
SUBJECT = RELATIONS["subj"]
NOMINAL_SUBJECT = RELATIONS["nsubj"]
NOMINAL_PASSIVE_SUBJECT = RELATIONS["nsubjpass"]
CLAUSAL_SUBJECT = RELATIONS["csubj"]
CLAUSAL_PASSIVE_SUBJECT = RELATIONS["csubjpass"]
DIRECT_OBJECT = RELATIONS["dobj"]
PREPOSITIONAL_OBJECT = RELATIONS["pobj"]
PREPOSITIONAL_COMPLEMENT = RELATIONS["pcomp"]
RELATIVE = RELATIONS["rel"]
AGENT = RELATIONS["agent"]
REFERENT = RELATIONS["ref"]
TEMPORAL_MODIFIER = RELATIONS["tmod"]
ADJECTIVAL_MODIFIER = RELATIONS["amod"]
PARTICIPIAL_MODIFIER = RELATIONS["partmod"]
ADVERBIAL_MODIFIER = RELATIONS["advmod"]
POSSESSION_MODIFIER = RELATIONS["poss"]
POSSESSIVE_MODIFIER = RELATIONS["possessive"]
PREPOSITIONAL_MODIFIER = RELATIONS["prep"]
PHRASAL_VERB_PARTICLE = RELATIONS["prt"]

_SUBJECT_PARENTS = frozenset({"nsubj", "subj", "csubj"})


def _family(prefix: str, specific: str) -> GrammaticalRelation:
    long_name, parent = _FAMILIES[prefix]
    return GrammaticalRelation(prefix, long_name, parent, specific.lower())


def prep(word: str) -> GrammaticalRelation:
    """Collapsed preposition relation, e.g. prep("because_of")."""
    return _family("prep", word)


def prepc(word: str) -> GrammaticalRelation:
    """Collapsed prepositional-complement relation."""
    return _family("prepc", word)


def conj(coordinator: str) -> GrammaticalRelation:
    """Collapsed coordination relation, e.g. conj("and")."""
    return _family("conj", coordinator)


def is_specific_conj(relation: GrammaticalRelation) -> bool:
    return relation.short_name == "conj" and relation.specific is not None


def is_subject(relation: GrammaticalRelation) -> bool:
    """True for relations under nsubj, subj or csubj (xsubj is an sdep)."""
    # the parent is tested, not the relation: bare subj (parent arg) is not a subject
    return relation.specific is None and relation.parent in _SUBJECT_PARENTS


def get_relation(short_name: str) -> GrammaticalRelation:
    """Resolve a short name from the interchange format.

    Args:
        short_name: Catalog short name ("nsubj") or family name ("prep_of").

    Returns:
        The matching relation.

    Raises:
        UnknownRelationError: If the name is neither in the catalog nor a
            well-formed member of a parametrized family.
    """
    relation = RELATIONS.get(short_name)
    if relation is not None:
        return relation
    prefix, sep, specific = short_name.partition("_")
    if sep and specific and prefix in _FAMILIES:
        return _family(prefix, specific)
    raise UnknownRelationError(short_name)


def list_relations() -> list[str]:
    """List the short names of the closed catalog."""
    return list(RELATIONS.keys())
