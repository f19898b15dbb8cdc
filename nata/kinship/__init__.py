"""Kinship inference: relation tables, graph, path search and term resolution."""
from nata.kinship.relation_types import RelationType, RelationCategory, TERMS
from nata.kinship.errors import (
    AugmenterUnavailable, KinshipError, NoPathFound, PersonNotFound, UnmappedRelationType
)

__all__ = [
    "RelationType", "RelationCategory", "TERMS",
    "AugmenterUnavailable", "KinshipError", "NoPathFound", "PersonNotFound", "UnmappedRelationType",
]
