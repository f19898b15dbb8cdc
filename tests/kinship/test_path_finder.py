"""Tests for breadth-first relation path search."""

from nata.kinship.graph import KinshipGraph
from nata.kinship.path_finder import find_path
from nata.kinship.relation_types import RelationType as R


def _graph(persons, relations):
    return KinshipGraph.build(persons, relations)


class TestFindPath:
    """Shortest paths over the bidirectional graph."""

    def test_self_is_empty_path(self, family_persons, family_relations):
        path = find_path(_graph(family_persons, family_relations), "ram", "ram")
        assert path.types == ()
        assert path.person_ids == ("ram",)

    def test_direct_relation(self, family_persons, family_relations):
        path = find_path(_graph(family_persons, family_relations), "hari", "ram")
        assert path.types == (R.BUWA,)
        assert path.person_ids == ("hari", "ram")

    def test_two_hops(self, family_persons, family_relations):
        """Hari's father's father."""
        path = find_path(_graph(family_persons, family_relations), "hari", "shyam")
        assert path.types == (R.BUWA, R.BUWA)
        assert path.person_ids == ("hari", "ram", "shyam")
        assert path.source_id == "hari"
        assert path.target_id == "shyam"

    def test_shortest_path_preferred(self, family_persons, family_relations):
        """Sita reaches Hari directly, not through Ram."""
        path = find_path(_graph(family_persons, family_relations), "sita", "hari")
        assert len(path) == 1

    def test_unreachable_returns_none(self, family_persons, family_relations):
        assert find_path(_graph(family_persons, family_relations), "hari", "loner") is None

    def test_first_discovered_edge_wins(self, make_person, make_relation):
        """Contradictory relations: the first stored one decides."""
        persons = [make_person("a", "M"), make_person("b", "M")]
        relations = [
            make_relation("r1", "a", "kaka", "b"),
            make_relation("r2", "a", "buwa", "b"),
        ]
        path = find_path(_graph(persons, relations), "b", "a")
        assert path.types == (R.KAKA,)

    def test_cycle_terminates(self, make_person, make_relation):
        """Contradictory cycle A->B->A does not loop forever."""
        persons = [make_person("a", "M"), make_person("b", "M"), make_person("c", "F")]
        relations = [
            make_relation("r1", "a", "buwa", "b"),
            make_relation("r2", "b", "buwa", "a"),
        ]
        assert find_path(_graph(persons, relations), "a", "c") is None

    def test_unknown_source_has_no_neighbors(self, family_persons, family_relations):
        assert find_path(_graph(family_persons, family_relations), "ghost", "ram") is None
