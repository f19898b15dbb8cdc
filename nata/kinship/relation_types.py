"""Nepali kinship vocabulary.

Every relation tag the engine knows, grouped into five categories, with its
Devanagari label and transliteration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from nata.kinship.errors import UnmappedRelationType


class RelationCategory(str, Enum):
    """Lineage/generation grouping of relation types."""
    PRIMARY = "primary"
    MATERNAL = "maternal"
    PATERNAL = "paternal"
    SPOUSAL = "spousal"
    GENERATIONAL = "generational"


class RelationType(str, Enum):
    """Closed set of relation tags. Values are the wire form used in exports."""
    # Primary
    BUWA = "buwa"
    AMA = "ama"
    CHHORA = "chhora"
    CHHORI = "chhori"
    DAJU = "daju"
    BHAI = "bhai"
    DIDI = "didi"
    BAHINI = "bahini"

    # Maternal
    MAMA = "mama"
    MAIJU = "maiju"
    SANI_AMA = "sani_ama"
    BHANJA = "bhanja"
    BHANJI = "bhanji"

    # Paternal
    KAKA = "kaka"
    KAKI = "kaki"
    THULO_BUWA = "thulo_buwa"
    THULI_AMA = "thuli_ama"
    BHATIJA = "bhatija"
    BHATIJI = "bhatiji"
    FUPU = "fupu"
    FUPAJU = "fupaju"
    BHADA = "bhada"
    BHADAI = "bhadai"

    # Spouse & in-laws
    SHREEMAN = "shreeman"
    SHREEMATI = "shreemati"
    SASURA = "sasura"
    SASU = "sasu"
    JWAI = "jwai"
    BUHARI = "buhari"
    SALO = "salo"
    SALI = "sali"
    JETHAN = "jethan"
    BHENA = "bhena"
    NANDA = "nanda"

    # Multi-generational
    BAJE = "baje"
    BAJYAI = "bajyai"
    NATI = "nati"
    NATINI = "natini"
    JYUJYU_BAJE = "jyujyu_baje"
    JYUJYU_BAJYAI = "jyujyu_bajyai"
    PANATI = "panati"
    PANATINI = "panatini"


@dataclass(frozen=True)
class TermInfo:
    """Display information for one relation type."""
    nepali: str
    roman: str
    english: str
    category: RelationCategory
    gender: Optional[str]  # "M", "F" or None

    @property
    def label(self) -> str:
        return f"{self.nepali} ({self.roman})"


_P = RelationCategory.PRIMARY
_M = RelationCategory.MATERNAL
_F = RelationCategory.PATERNAL
_S = RelationCategory.SPOUSAL
_G = RelationCategory.GENERATIONAL

TERMS: dict[RelationType, TermInfo] = {
    RelationType.BUWA: TermInfo("बुवा", "Buwa", "father", _P, "M"),
    RelationType.AMA: TermInfo("आमा", "Aama", "mother", _P, "F"),
    RelationType.CHHORA: TermInfo("छोरा", "Chhora", "son", _P, "M"),
    RelationType.CHHORI: TermInfo("छोरी", "Chhori", "daughter", _P, "F"),
    RelationType.DAJU: TermInfo("दाजु", "Daju", "elder brother", _P, "M"),
    RelationType.BHAI: TermInfo("भाइ", "Bhai", "younger brother", _P, "M"),
    RelationType.DIDI: TermInfo("दिदी", "Didi", "elder sister", _P, "F"),
    RelationType.BAHINI: TermInfo("बहिनी", "Bahini", "younger sister", _P, "F"),

    RelationType.MAMA: TermInfo("मामा", "Mama", "mother's brother", _M, "M"),
    RelationType.MAIJU: TermInfo("माइजू", "Maiju", "mother's brother's wife", _M, "F"),
    RelationType.SANI_AMA: TermInfo("सानी आमा", "Sani Aama", "mother's younger sister", _M, "F"),
    RelationType.BHANJA: TermInfo("भान्जा", "Bhanja", "sister's son", _M, "M"),
    RelationType.BHANJI: TermInfo("भान्जी", "Bhanji", "sister's daughter", _M, "F"),

    RelationType.KAKA: TermInfo("काका", "Kaka", "father's younger brother", _F, "M"),
    RelationType.KAKI: TermInfo("काकी", "Kaki", "father's younger brother's wife", _F, "F"),
    RelationType.THULO_BUWA: TermInfo("ठूलो बुवा", "Thulo Buwa", "father's elder brother", _F, "M"),
    RelationType.THULI_AMA: TermInfo("ठूली आमा", "Thuli Aama", "father's elder brother's wife", _F, "F"),
    RelationType.BHATIJA: TermInfo("भतिजा", "Bhatija", "brother's son", _F, "M"),
    RelationType.BHATIJI: TermInfo("भतिजी", "Bhatiji", "brother's daughter", _F, "F"),
    RelationType.FUPU: TermInfo("फुपू", "Phupu", "father's sister", _F, "F"),
    RelationType.FUPAJU: TermInfo("फुपाजु", "Phupaju", "father's sister's husband", _F, "M"),
    RelationType.BHADA: TermInfo("भादा", "Bhada", "brother's son (to his sister)", _F, "M"),
    RelationType.BHADAI: TermInfo("भादै", "Bhadai", "brother's daughter (to his sister)", _F, "F"),

    RelationType.SHREEMAN: TermInfo("श्रीमान", "Shreeman", "husband", _S, "M"),
    RelationType.SHREEMATI: TermInfo("श्रीमती", "Shreemati", "wife", _S, "F"),
    RelationType.SASURA: TermInfo("ससुरा", "Sasura", "father-in-law", _S, "M"),
    RelationType.SASU: TermInfo("सासू", "Sasu", "mother-in-law", _S, "F"),
    RelationType.JWAI: TermInfo("ज्वाईं", "Jwain", "son-in-law", _S, "M"),
    RelationType.BUHARI: TermInfo("बुहारी", "Buhari", "daughter-in-law", _S, "F"),
    RelationType.SALO: TermInfo("सालो", "Salo", "wife's younger brother", _S, "M"),
    RelationType.SALI: TermInfo("साली", "Sali", "wife's younger sister", _S, "F"),
    RelationType.JETHAN: TermInfo("जेठान", "Jethan", "wife's elder brother", _S, "M"),
    RelationType.BHENA: TermInfo("भेना", "Bhena", "sister's husband", _S, "M"),
    RelationType.NANDA: TermInfo("नन्द", "Nanda", "husband's sister", _S, "F"),

    RelationType.BAJE: TermInfo("बाजे", "Baje", "grandfather", _G, "M"),
    RelationType.BAJYAI: TermInfo("बज्यै", "Bajyai", "grandmother", _G, "F"),
    RelationType.NATI: TermInfo("नाति", "Nati", "grandson", _G, "M"),
    RelationType.NATINI: TermInfo("नातिनी", "Natini", "granddaughter", _G, "F"),
    RelationType.JYUJYU_BAJE: TermInfo("ज्युज्यु बाजे", "Jyujyu Baje", "great-grandfather", _G, "M"),
    RelationType.JYUJYU_BAJYAI: TermInfo("ज्युज्यु बज्यै", "Jyujyu Bajyai", "great-grandmother", _G, "F"),
    RelationType.PANATI: TermInfo("पनाति", "Panati", "great-grandson", _G, "M"),
    RelationType.PANATINI: TermInfo("पनातिनी", "Panatini", "great-granddaughter", _G, "F"),
}

SPOUSE_TYPES = frozenset({RelationType.SHREEMAN, RelationType.SHREEMATI})
CHILD_TYPES = frozenset({RelationType.CHHORA, RelationType.CHHORI})


def term_info(relation_type: RelationType) -> TermInfo:
    """Look up display info; a missing entry is a table defect."""
    try:
        return TERMS[relation_type]
    except KeyError:
        raise UnmappedRelationType(relation_type, table="TERMS") from None


def label(relation_type: RelationType) -> str:
    """Display label, e.g. ``बुवा (Buwa)``."""
    return term_info(relation_type).label


def category(relation_type: RelationType) -> RelationCategory:
    return term_info(relation_type).category
