"""Propagate shared dependents across coordinated conjuncts.

Runs after conjunction collapse and only adds edges. For every
conj_<word>(gov, dep):

- each edge coming into ``gov`` is duplicated onto ``dep``;
- the subject of ``gov`` is given to a verbal or adjectival ``dep`` that has
  no subject of its own;
- the direct object of ``gov`` is given to a verbal ``dep`` that has none.

Only the first subject and the first object recorded for a governor are
propagated; a second coordinated subject or object is not carried over.
"""

from __future__ import annotations

import logging

from depcollapse.graph.relations import (
    CLAUSAL_PASSIVE_SUBJECT,
    CLAUSAL_SUBJECT,
    DIRECT_OBJECT,
    NOMINAL_PASSIVE_SUBJECT,
    NOMINAL_SUBJECT,
    is_specific_conj,
    is_subject,
)
from depcollapse.graph.store import DependencyStore
from depcollapse.graph.types import Edge, Node

logger = logging.getLogger(__name__)

_ACTIVE_FORMS = {
    NOMINAL_PASSIVE_SUBJECT: NOMINAL_SUBJECT,
    CLAUSAL_PASSIVE_SUBJECT: CLAUSAL_SUBJECT,
}


def _looks_active(node: Node) -> bool:
    # base-form verbs and adjectives (participles are often tagged JJ)
    return node.tag == "VB" or node.tag.startswith("JJ")


def treat_cc(store: DependencyStore) -> None:
    incoming = store.incoming()
    subjects: dict[Node, Edge] = {}
    objects: dict[Node, Edge] = {}
    for edge in store.edges:
        if not edge.is_active:
            continue
        if is_subject(edge.relation):
            subjects.setdefault(edge.governor, edge)
        if edge.relation == DIRECT_OBJECT:
            objects.setdefault(edge.governor, edge)

    new_edges: list[Edge] = []
    for td in store.edges:
        if not (td.is_active and is_specific_conj(td.relation)):
            continue
        gov, dep = td.governor, td.dependent

        for td1 in incoming.get(gov, []):
            new_edges.append(Edge(td1.governor, dep, td1.relation))

        # copular verbs are missed: the dep has to be verbal or adjectival
        if gov in subjects and dep.tag.startswith(("VB", "JJ")) and dep not in subjects:
            subject = subjects[gov]
            relation = subject.relation
            if _looks_active(dep):
                relation = _ACTIVE_FORMS.get(relation, relation)
            new_edges.append(Edge(dep, subject.dependent, relation))

        if gov in objects and dep.tag.startswith("VB") and dep not in objects:
            obj = objects[gov]
            new_edges.append(Edge(dep, obj.dependent, obj.relation))

    for edge in new_edges:
        logger.debug("cc propagation adding: %s", edge)
    store.edges.extend(new_edges)
