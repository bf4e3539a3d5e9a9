"""Word filters applied to dependents when a structure is built."""

from __future__ import annotations

from typing import Callable

WordFilter = Callable[[str], bool]

# Penn Treebank punctuation tokens, including bracket escapes
PUNCTUATION_TOKENS = frozenset({
    "''", "'", "``", "`",
    "-LRB-", "-RRB-", "-LCB-", "-RCB-", "-LSB-", "-RSB-",
    ".", "?", "!", ",", ":", "-", "--", "...", ";",
})


def punctuation_reject_filter(word: str) -> bool:
    """Accept ``word`` unless it is a punctuation token."""
    return word not in PUNCTUATION_TOKENS


def accept_all(word: str) -> bool:
    return True
