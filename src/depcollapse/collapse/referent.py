"""Substitute relative-clause antecedents for relative words.

    ref(man, that) + dobj(love, that) -> dobj(love, man)
"""

from __future__ import annotations

import logging

from depcollapse.graph.relations import REFERENT, RELATIVE
from depcollapse.graph.store import DependencyStore

logger = logging.getLogger(__name__)


def collapse_referent(store: DependencyStore) -> None:
    refs = [e for e in store.edges if e.has(REFERENT)]
    for ref in refs:
        ref.remove()
    store.purge()

    for ref in refs:
        antecedent, relative_word = ref.governor, ref.dependent
        for td in store.edges:
            # skipping edges already governed by the antecedent avoids a
            # unit cycle that would disconnect something else
            if (
                td.dependent == relative_word
                and td.relation not in (RELATIVE, REFERENT)
                and td.governor != antecedent
            ):
                logger.debug("referent: changing %s", td)
                td.dependent = antecedent
