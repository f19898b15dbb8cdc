"""Relation store package."""
from nata.graph.relation_store import RelationStore, StoreSnapshot

__all__ = ["RelationStore", "StoreSnapshot"]
