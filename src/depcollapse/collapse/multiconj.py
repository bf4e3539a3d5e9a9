"""Remove leftover pieces of multiword coordinators ("as well as")."""

from __future__ import annotations

import logging

from depcollapse.graph.relations import COORDINATION, DEPENDENT
from depcollapse.graph.store import DependencyStore

logger = logging.getLogger(__name__)


def erase_multi_conj(store: DependencyStore) -> None:
    # bread-1 as-2 well-3 as-4 cheese-5: cc(bread, well) keeps the phrase
    # head, dep(well, as) and dep(well, as) would end up disconnected
    coordinators = {e.dependent for e in store.edges if e.has(COORDINATION)}
    for edge in store.edges:
        if edge.has(DEPENDENT) and edge.governor in coordinators:
            logger.debug("removing rest of multiword conj: %s", edge)
            edge.remove()
    store.purge()
