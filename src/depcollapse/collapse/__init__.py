"""Rewrite passes that turn basic dependencies into collapsed views."""

from depcollapse.collapse.cc_processing import treat_cc
from depcollapse.collapse.conjunctions import collapse_conj, conj_value
from depcollapse.collapse.correction import correct_subj_pass_and_poss
from depcollapse.collapse.multiconj import erase_multi_conj
from depcollapse.collapse.multiword import (
    MULTIWORD_PREPS,
    THREEWORD_PREPS,
    collapse_flat_multiword_preps,
    collapse_three_word_preps,
    collapse_two_word_preps,
    collapse_two_word_preps_shared_governor,
)
from depcollapse.collapse.prepositions import collapse_prep_and_poss
from depcollapse.collapse.referent import collapse_referent

__all__ = [
    "correct_subj_pass_and_poss",
    "erase_multi_conj",
    # Multiword prepositions
    "MULTIWORD_PREPS",
    "THREEWORD_PREPS",
    "collapse_two_word_preps",
    "collapse_flat_multiword_preps",
    "collapse_two_word_preps_shared_governor",
    "collapse_three_word_preps",
    # Prepositions, conjunctions, referents
    "collapse_prep_and_poss",
    "collapse_conj",
    "conj_value",
    "treat_cc",
    "collapse_referent",
]
