"""Nata - Nepali kinship inference over a family relation graph."""

from nata.models import Gender, Person, Relation
from nata.graph.relation_store import RelationStore
from nata.kinship.engine import KinshipEngine, KinshipResult, PhrasedResult
from nata.kinship.errors import NoPathFound, PersonNotFound
from nata.kinship.relation_types import RelationType
from nata.kinship.resolver import Confidence

__all__ = [
    "Gender",
    "Person",
    "Relation",
    "RelationStore",
    "RelationType",
    "KinshipEngine",
    "KinshipResult",
    "PhrasedResult",
    "Confidence",
    "NoPathFound",
    "PersonNotFound",
]
