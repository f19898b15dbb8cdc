"""In-memory relation store feeding the kinship engine."""

import json
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from nata.kinship.relation_types import RelationType
from nata.models import Person, Relation


@dataclass(frozen=True)
class StoreSnapshot:
    """Consistent view of the store at one version."""
    persons: tuple[Person, ...]
    relations: tuple[Relation, ...]
    version: int


class RelationStore:
    """
    Persons and relations held in memory, with a version counter.

    Every mutation bumps `version`; the engine rebuilds its graph when the
    version it built from is stale.

    Usage:
        store = RelationStore()
        store.add_person(Person(id="ram", name="Ram", gender="male"))
        store.add_person(Person(id="sita", name="Sita", gender="female"))
        store.add_relation(Relation(id="r1", from_id="ram", to_id="sita", type="buwa"))
    """

    def __init__(self, persons: list[Person] = None, relations: list[Relation] = None):
        self._lock = threading.Lock()
        self._persons: dict[str, Person] = {p.id: p for p in persons or []}
        self._relations: dict[str, Relation] = {r.id: r for r in relations or []}
        self._version = 0

    @classmethod
    def from_dict(cls, data: dict) -> "RelationStore":
        """Load the `{members: [...], relations: [...]}` export shape."""
        persons = [Person.model_validate(m) for m in data.get("members", data.get("persons", []))]
        relations = [Relation.model_validate(r) for r in data.get("relations", [])]
        return cls(persons, relations)

    @classmethod
    def load_json(cls, path) -> "RelationStore":
        with open(Path(path), encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> dict:
        snap = self.snapshot()
        return {
            "members": [p.model_dump(mode="json", exclude_none=True) for p in snap.persons],
            "relations": [r.model_dump(mode="json", by_alias=True) for r in snap.relations],
        }

    @property
    def version(self) -> int:
        return self._version

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(
                tuple(self._persons.values()),
                tuple(self._relations.values()),
                self._version,
            )

    # ─────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────

    def persons(self) -> list[Person]:
        return list(self.snapshot().persons)

    def relations(self) -> list[Relation]:
        return list(self.snapshot().relations)

    def get_person(self, person_id: str) -> Optional[Person]:
        return self._persons.get(person_id)

    def get_relation(self, relation_id: str) -> Optional[Relation]:
        return self._relations.get(relation_id)

    # ─────────────────────────────────────────
    # Writes (each bumps the version)
    # ─────────────────────────────────────────

    def add_person(self, person: Person) -> str:
        with self._lock:
            self._persons[person.id] = person
            self._version += 1
        return person.id

    def remove_person(self, person_id: str) -> bool:
        """Remove a person. Their relations stay and are skipped at build time."""
        with self._lock:
            if self._persons.pop(person_id, None) is None:
                return False
            self._version += 1
        return True

    def add_relation(self, relation: Relation) -> str:
        with self._lock:
            self._relations[relation.id] = relation
            self._version += 1
        return relation.id

    def update_relation(self, relation_id: str, new_type: RelationType) -> bool:
        """Change the type of an existing relation."""
        with self._lock:
            current = self._relations.get(relation_id)
            if current is None:
                return False
            self._relations[relation_id] = current.model_copy(update={"type": RelationType(new_type)})
            self._version += 1
        return True

    def remove_relation(self, relation_id: str) -> bool:
        with self._lock:
            if self._relations.pop(relation_id, None) is None:
                return False
            self._version += 1
        return True
