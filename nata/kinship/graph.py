"""Bidirectional kinship graph built from a relation snapshot."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from nata.kinship.inverse import inverse_relation
from nata.kinship.relation_types import RelationType
from nata.models import Person, Relation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """`to` is the `type` of the edge's owner."""
    to: str
    type: RelationType


class KinshipGraph:
    """
    Immutable adjacency view over one snapshot of persons and relations.

    Every stored relation becomes two edges so both directions are
    navigable:
        to   -> (from, T)                       from is T of to
        from -> (to, inverse(T, gender(to)))    to is inverse of from

    Usage:
        graph = KinshipGraph.build(persons, relations)
        for edge in graph.neighbors("ram"):
            ...
    """

    def __init__(self, persons: Mapping[str, Person],
                 adjacency: Mapping[str, tuple[Edge, ...]],
                 relations: tuple[Relation, ...] = (), version: int = 0):
        self._persons = MappingProxyType(dict(persons))
        self._adjacency = MappingProxyType(dict(adjacency))
        self._relations = tuple(relations)
        self.version = version

    @classmethod
    def build(cls, persons: Iterable[Person], relations: Iterable[Relation],
              version: int = 0) -> "KinshipGraph":
        """Build the adjacency lists in one pass over the relations."""
        by_id = {p.id: p for p in persons}
        adjacency: dict[str, list[Edge]] = {pid: [] for pid in by_id}
        kept = []
        skipped = 0

        for rel in relations:
            source = by_id.get(rel.from_id)
            target = by_id.get(rel.to_id)
            if source is None or target is None:
                skipped += 1
                logger.warning("Skipping relation %s: endpoint missing (%s -> %s)",
                               rel.id, rel.from_id, rel.to_id)
                continue

            adjacency[rel.to_id].append(Edge(rel.from_id, rel.type))
            inv_type = inverse_relation(rel.type, target.gender)
            adjacency[rel.from_id].append(Edge(rel.to_id, inv_type))
            kept.append(rel)

        logger.info("Built kinship graph v%d: %d persons, %d relations (%d skipped)",
                    version, len(by_id), len(kept), skipped)

        return cls(
            by_id,
            {pid: tuple(edges) for pid, edges in adjacency.items()},
            tuple(kept),
            version,
        )

    def __contains__(self, person_id: str) -> bool:
        return person_id in self._persons

    def __len__(self) -> int:
        return len(self._persons)

    @property
    def relations(self) -> tuple[Relation, ...]:
        """Relations that made it into the graph."""
        return self._relations

    def person(self, person_id: str) -> Optional[Person]:
        return self._persons.get(person_id)

    def persons(self) -> list[Person]:
        return list(self._persons.values())

    def neighbors(self, person_id: str) -> tuple[Edge, ...]:
        """Outgoing edges in insertion order."""
        return self._adjacency.get(person_id, ())

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())
