"""Pytest fixtures shared across kinship tests."""

import pytest

from nata.graph.relation_store import RelationStore
from nata.kinship.engine import KinshipEngine
from nata.models import Person, Relation


def _person(pid: str, gender: str) -> Person:
    return Person(id=pid, name=pid.title(), gender=gender)


def _rel(rid: str, from_id: str, rel_type: str, to_id: str) -> Relation:
    return Relation(id=rid, from_id=from_id, to_id=to_id, type=rel_type)


@pytest.fixture
def family_persons():
    """
    Shyam
      |
     Ram ==== Sita ---- Krishna (her elder brother), Maya (her elder sister)
      |    \\     |
     Gita   Hari
    Loner has no relations.
    """
    return [
        _person("shyam", "M"),
        _person("ram", "M"),
        _person("sita", "F"),
        _person("hari", "M"),
        _person("gita", "F"),
        _person("krishna", "M"),
        _person("maya", "F"),
        _person("loner", "F"),
    ]


@pytest.fixture
def family_relations():
    """Stored relations: `from` is the `type` of `to`."""
    return [
        _rel("r1", "ram", "shreeman", "sita"),
        _rel("r2", "ram", "buwa", "hari"),
        _rel("r3", "sita", "ama", "hari"),
        _rel("r4", "ram", "buwa", "gita"),
        _rel("r5", "shyam", "buwa", "ram"),
        _rel("r6", "krishna", "daju", "sita"),
        _rel("r7", "maya", "didi", "sita"),
    ]


@pytest.fixture
def store(family_persons, family_relations):
    """RelationStore loaded with the sample family."""
    return RelationStore(family_persons, family_relations)


@pytest.fixture
def engine(store):
    """KinshipEngine over the sample family, no phrasing agent."""
    return KinshipEngine(store)


@pytest.fixture
def make_person():
    return _person


@pytest.fixture
def make_relation():
    return _rel
