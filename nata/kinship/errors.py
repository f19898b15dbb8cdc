"""Kinship engine errors and negative results."""

from dataclasses import dataclass


class KinshipError(Exception):
    """Base class for kinship engine errors."""


class PersonNotFound(KinshipError, LookupError):
    """A person id is not part of the current snapshot."""

    def __init__(self, person_id: str):
        self.person_id = person_id
        super().__init__(f"Person not found: {person_id!r}")


class UnmappedRelationType(KinshipError):
    """A lookup table is missing a relation type. Always a programming error."""

    def __init__(self, relation_type, table: str = "INVERSE_TABLE"):
        self.relation_type = relation_type
        self.table = table
        super().__init__(f"{table} has no entry for relation type {relation_type!r}")


class AugmenterUnavailable(KinshipError):
    """The phrasing service failed, timed out or returned nothing."""


@dataclass(frozen=True)
class NoPathFound:
    """Search exhausted without reaching the target. A result, not an error."""
    source_id: str
    target_id: str

    def __bool__(self) -> bool:
        return False
