"""KinshipEngine facade combining graph, search and term resolution."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from nata.config import settings
from nata.graph.relation_store import RelationStore
from nata.kinship.errors import NoPathFound, PersonNotFound
from nata.kinship.graph import KinshipGraph
from nata.kinship.inverse import inverse_relation
from nata.kinship.path_finder import find_path
from nata.kinship.relation_types import RelationType, label
from nata.kinship.resolver import Confidence, TermResolver
from nata.models import Relation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KinshipResult:
    """What the target is to the source."""
    term: str
    confidence: Confidence
    path: tuple[RelationType, ...]
    normalized_path: tuple[RelationType, ...]
    person_ids: tuple[str, ...]

    @property
    def hops(self) -> int:
        return len(self.path)


@dataclass(frozen=True)
class PhrasedResult:
    """Deterministic result plus the displayed (possibly LLM-phrased) text."""
    result: KinshipResult
    display: str
    phrased: bool
    error: Optional[str] = None

    @property
    def term(self) -> str:
        return self.result.term


@dataclass(frozen=True)
class EdgeLabel:
    relation_id: str
    from_id: str
    to_id: str
    forward: str   # what `from` is to `to`
    reverse: str   # what `to` is to `from`


class KinshipEngine:
    """
    Main interface for kinship queries.

    The graph is built from the store lazily and rebuilt only when the
    store version moves. Each query captures one graph snapshot and runs
    against it to completion.

    Usage:
        engine = KinshipEngine(store)
        result = engine.resolve_relationship("sita", "ram")
        result.term   # 'बुवा (Buwa)'
    """

    def __init__(self, store: RelationStore, resolver: TermResolver = None, phrasing_agent=None):
        self.store = store
        self.resolver = resolver or TermResolver(self_term=settings.kinship.self_term)
        self.phrasing_agent = phrasing_agent
        self._graph: Optional[KinshipGraph] = None

    # ─────────────────────────────────────────
    # Graph snapshot
    # ─────────────────────────────────────────

    def snapshot(self) -> KinshipGraph:
        """Current graph, rebuilt if the store changed since the last build."""
        graph = self._graph
        if graph is None or graph.version != self.store.version:
            snap = self.store.snapshot()
            graph = KinshipGraph.build(snap.persons, snap.relations, version=snap.version)
            self._graph = graph
        return graph

    def invalidate(self) -> None:
        """Force a rebuild on the next query."""
        self._graph = None

    # ─────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────

    def resolve_relationship(self, source_id: str, target_id: str,
                             graph: KinshipGraph = None) -> Union[KinshipResult, NoPathFound]:
        """
        Resolve what `target_id` is to `source_id`.

        Raises PersonNotFound for ids missing from the snapshot; returns
        NoPathFound when the two people are not connected.
        """
        if graph is None:
            graph = self.snapshot()
        for person_id in (source_id, target_id):
            if person_id not in graph:
                raise PersonNotFound(person_id)

        path = find_path(graph, source_id, target_id)
        if path is None:
            logger.debug("No path between %s and %s", source_id, target_id)
            return NoPathFound(source_id, target_id)

        target = graph.person(target_id)
        resolution = self.resolver.resolve(path.types, target.gender)
        return KinshipResult(
            term=resolution.term,
            confidence=resolution.confidence,
            path=path.types,
            normalized_path=resolution.normalized_path,
            person_ids=path.person_ids,
        )

    def label_edge(self, relation: Relation, reverse: bool = False,
                   graph: KinshipGraph = None) -> str:
        """
        Label one stored relation.

        forward: what `from` is to `to` (the stored type).
        reverse: what `to` is to `from`, from the inverse table and `to`'s gender.
        """
        if not reverse:
            return label(relation.type)

        if graph is None:
            graph = self.snapshot()
        target = graph.person(relation.to_id)
        if target is None:
            raise PersonNotFound(relation.to_id)
        return label(inverse_relation(relation.type, target.gender))

    def edge_labels(self) -> list[EdgeLabel]:
        """Both labels for every relation in the current snapshot."""
        graph = self.snapshot()
        return [
            EdgeLabel(
                relation_id=rel.id,
                from_id=rel.from_id,
                to_id=rel.to_id,
                forward=self.label_edge(rel, graph=graph),
                reverse=self.label_edge(rel, reverse=True, graph=graph),
            )
            for rel in graph.relations
        ]

    async def resolve_phrased(self, source_id: str, target_id: str,
                              timeout: Optional[float] = None) -> Union[PhrasedResult, NoPathFound]:
        """
        Resolve, then optionally ask the phrasing agent for display text.

        The deterministic term is computed before the agent is called and is
        used whenever the agent is missing, fails or times out.
        """
        graph = self.snapshot()
        result = self.resolve_relationship(source_id, target_id, graph=graph)
        if isinstance(result, NoPathFound):
            return result

        if self.phrasing_agent is None:
            return PhrasedResult(result, result.term, False)

        people = tuple(graph.person(pid) for pid in result.person_ids)
        outcome = await self.phrasing_agent.phrase_result(result, people, timeout=timeout)
        return PhrasedResult(result, outcome.text, outcome.phrased, outcome.error)
