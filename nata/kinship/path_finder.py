"""Shortest relation path between two people."""

from collections import deque
from dataclasses import dataclass
from typing import Optional

from nata.kinship.graph import KinshipGraph
from nata.kinship.relation_types import RelationType


@dataclass(frozen=True)
class RelationPath:
    """Relation types walked and the people visited (one more than types)."""
    types: tuple[RelationType, ...]
    person_ids: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.types)

    @property
    def source_id(self) -> str:
        return self.person_ids[0]

    @property
    def target_id(self) -> str:
        return self.person_ids[-1]


def find_path(graph: KinshipGraph, source_id: str, target_id: str) -> Optional[RelationPath]:
    """
    Breadth-first search from source to target.

    Edges are explored in adjacency order, so among equally short paths the
    first discovered wins. Returns None when the target is unreachable.
    """
    queue = deque([(source_id, (), (source_id,))])
    visited = {source_id}

    while queue:
        current, types, nodes = queue.popleft()
        if current == target_id:
            return RelationPath(types, nodes)

        for edge in graph.neighbors(current):
            if edge.to in visited:
                continue
            visited.add(edge.to)
            queue.append((edge.to, types + (edge.type,), nodes + (edge.to,)))

    return None
