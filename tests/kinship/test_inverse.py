"""Tests for the inverse relation table."""

import pytest

from nata.kinship import inverse
from nata.kinship.errors import UnmappedRelationType
from nata.kinship.inverse import INVERSE_TABLE, check_tables, inverse_relation
from nata.kinship.relation_types import TERMS, RelationCategory, RelationType as R, category
from nata.models import Gender

# Types whose inverse names a broader role than the type itself
# (e.g. thulo buwa -> bhatija -> kaka), so the round trip does not return.
LOSSY = {R.SANI_AMA, R.THULO_BUWA, R.THULI_AMA, R.JETHAN, R.NANDA}


class TestCoverage:
    """Every relation type is mapped."""

    def test_every_type_has_inverse(self):
        """The table is exhaustive over the enumeration."""
        assert set(INVERSE_TABLE) == set(R)

    def test_every_type_has_term(self):
        assert set(TERMS) == set(R)

    def test_check_tables_passes(self):
        check_tables()

    def test_missing_entry_is_fatal(self, monkeypatch):
        """A gap in the table raises instead of falling back."""
        table = dict(INVERSE_TABLE)
        del table[R.KAKA]
        monkeypatch.setattr(inverse, "INVERSE_TABLE", table)

        with pytest.raises(UnmappedRelationType):
            inverse_relation(R.KAKA, Gender.MALE)
        with pytest.raises(UnmappedRelationType):
            check_tables()


class TestPairings:
    """Category pairing rules."""

    @pytest.mark.parametrize("parent", [R.BUWA, R.AMA])
    def test_parent_to_child(self, parent):
        assert inverse_relation(parent, Gender.FEMALE) == R.CHHORI
        assert inverse_relation(parent, Gender.MALE) == R.CHHORA

    @pytest.mark.parametrize("child", [R.CHHORA, R.CHHORI])
    def test_child_to_parent(self, child):
        assert inverse_relation(child, Gender.FEMALE) == R.AMA
        assert inverse_relation(child, Gender.MALE) == R.BUWA

    def test_elder_sibling_sees_younger(self):
        assert inverse_relation(R.DAJU, Gender.FEMALE) == R.BAHINI
        assert inverse_relation(R.DIDI, Gender.MALE) == R.BHAI

    def test_younger_sibling_sees_elder(self):
        assert inverse_relation(R.BHAI, Gender.MALE) == R.DAJU
        assert inverse_relation(R.BAHINI, Gender.FEMALE) == R.DIDI

    def test_maternal(self):
        assert inverse_relation(R.MAMA, Gender.MALE) == R.BHANJA
        assert inverse_relation(R.SANI_AMA, Gender.FEMALE) == R.BHANJI
        assert inverse_relation(R.BHANJI, Gender.FEMALE) == R.MAIJU

    def test_paternal(self):
        assert inverse_relation(R.THULO_BUWA, Gender.FEMALE) == R.BHATIJI
        assert inverse_relation(R.FUPU, Gender.MALE) == R.BHADA
        assert inverse_relation(R.BHADAI, Gender.MALE) == R.FUPAJU

    @pytest.mark.parametrize("gender", list(Gender))
    def test_spouse_inverse_ignores_gender(self, gender):
        """Husband and wife swap regardless of recorded gender."""
        assert inverse_relation(R.SHREEMAN, gender) == R.SHREEMATI
        assert inverse_relation(R.SHREEMATI, gender) == R.SHREEMAN

    @pytest.mark.parametrize("in_law", [R.SALO, R.SALI, R.JETHAN])
    def test_sibling_in_law_cluster(self, in_law):
        assert inverse_relation(in_law, Gender.FEMALE) == R.BHENA
        assert inverse_relation(in_law, Gender.MALE) == R.BHENA

    def test_bhena_reverse_uses_gender(self):
        assert inverse_relation(R.BHENA, Gender.FEMALE) == R.SALI
        assert inverse_relation(R.BHENA, Gender.MALE) == R.SALO

    def test_generations(self):
        assert inverse_relation(R.BAJYAI, Gender.MALE) == R.NATI
        assert inverse_relation(R.NATINI, Gender.FEMALE) == R.BAJYAI
        assert inverse_relation(R.JYUJYU_BAJE, Gender.FEMALE) == R.PANATINI
        assert inverse_relation(R.PANATI, Gender.MALE) == R.JYUJYU_BAJE

    def test_unspecified_takes_male_column(self):
        assert inverse_relation(R.BUWA, Gender.UNSPECIFIED) == R.CHHORA
        assert inverse_relation(R.BHENA, Gender.UNSPECIFIED) == R.SALO


class TestConsistency:
    """The table never crosses categories and pairs round-trip."""

    @pytest.mark.parametrize("rel_type", list(R))
    @pytest.mark.parametrize("gender", [Gender.MALE, Gender.FEMALE])
    def test_inverse_stays_in_category(self, rel_type, gender):
        assert category(inverse_relation(rel_type, gender)) == category(rel_type)

    @pytest.mark.parametrize("rel_type", [t for t in R if t not in LOSSY])
    @pytest.mark.parametrize("gender", [Gender.MALE, Gender.FEMALE])
    def test_round_trip(self, rel_type, gender):
        """Inverting twice, with the source's implied gender, returns the type."""
        source_gender = Gender.FEMALE if TERMS[rel_type].gender == "F" else Gender.MALE
        back = inverse_relation(inverse_relation(rel_type, gender), source_gender)
        assert back == rel_type

    def test_five_categories_present(self):
        assert {category(t) for t in R} == set(RelationCategory)
