"""Inverse relation table.

For a stored relation ``from -[T]-> to`` ("from is the T of to") the inverse
names ``to`` from ``from``'s side. The answer depends on the gender of ``to``:
only ``female`` takes the female column, male and unspecified take the other.
"""

from nata.kinship.errors import UnmappedRelationType
from nata.kinship.relation_types import RelationType as R, TERMS
from nata.models import Gender


# type: (target male/unspecified, target female)
INVERSE_TABLE: dict[R, tuple[R, R]] = {
    # 1. Primary: parents <-> children, elder <-> younger siblings
    R.BUWA: (R.CHHORA, R.CHHORI),
    R.AMA: (R.CHHORA, R.CHHORI),
    R.CHHORA: (R.BUWA, R.AMA),
    R.CHHORI: (R.BUWA, R.AMA),
    R.DAJU: (R.BHAI, R.BAHINI),
    R.DIDI: (R.BHAI, R.BAHINI),
    R.BHAI: (R.DAJU, R.DIDI),
    R.BAHINI: (R.DAJU, R.DIDI),

    # 2. Maternal: mother's brother / sister <-> sister's children
    R.MAMA: (R.BHANJA, R.BHANJI),
    R.MAIJU: (R.BHANJA, R.BHANJI),
    R.SANI_AMA: (R.BHANJA, R.BHANJI),
    R.BHANJA: (R.MAMA, R.MAIJU),
    R.BHANJI: (R.MAMA, R.MAIJU),

    # 3. Paternal: father's brothers <-> brother's children,
    #    father's sister <-> her brother's children
    R.KAKA: (R.BHATIJA, R.BHATIJI),
    R.KAKI: (R.BHATIJA, R.BHATIJI),
    R.THULO_BUWA: (R.BHATIJA, R.BHATIJI),
    R.THULI_AMA: (R.BHATIJA, R.BHATIJI),
    R.BHATIJA: (R.KAKA, R.KAKI),
    R.BHATIJI: (R.KAKA, R.KAKI),
    R.FUPU: (R.BHADA, R.BHADAI),
    R.FUPAJU: (R.BHADA, R.BHADAI),
    R.BHADA: (R.FUPAJU, R.FUPU),
    R.BHADAI: (R.FUPAJU, R.FUPU),

    # 4. Spouse & in-laws
    R.SHREEMAN: (R.SHREEMATI, R.SHREEMATI),
    R.SHREEMATI: (R.SHREEMAN, R.SHREEMAN),
    R.SASURA: (R.JWAI, R.BUHARI),
    R.SASU: (R.JWAI, R.BUHARI),
    R.JWAI: (R.SASURA, R.SASU),
    R.BUHARI: (R.SASURA, R.SASU),
    R.SALO: (R.BHENA, R.BHENA),
    R.SALI: (R.BHENA, R.BHENA),
    R.JETHAN: (R.BHENA, R.BHENA),
    R.BHENA: (R.SALO, R.SALI),
    R.NANDA: (R.BUHARI, R.BUHARI),

    # 5. Multi-generational
    R.BAJE: (R.NATI, R.NATINI),
    R.BAJYAI: (R.NATI, R.NATINI),
    R.NATI: (R.BAJE, R.BAJYAI),
    R.NATINI: (R.BAJE, R.BAJYAI),
    R.JYUJYU_BAJE: (R.PANATI, R.PANATINI),
    R.JYUJYU_BAJYAI: (R.PANATI, R.PANATINI),
    R.PANATI: (R.JYUJYU_BAJE, R.JYUJYU_BAJYAI),
    R.PANATINI: (R.JYUJYU_BAJE, R.JYUJYU_BAJYAI),
}


def inverse_relation(relation_type: R, target_gender: Gender) -> R:
    """Relation type naming the relation's target from its source's side."""
    try:
        male, female = INVERSE_TABLE[relation_type]
    except KeyError:
        raise UnmappedRelationType(relation_type) from None
    return female if target_gender == Gender.FEMALE else male


def check_tables() -> None:
    """Fail loudly if any relation type is missing from a lookup table."""
    for relation_type in R:
        if relation_type not in INVERSE_TABLE:
            raise UnmappedRelationType(relation_type, table="INVERSE_TABLE")
        if relation_type not in TERMS:
            raise UnmappedRelationType(relation_type, table="TERMS")


check_tables()
