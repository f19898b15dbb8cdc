"""Map a relation path to a kinship term."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from nata.kinship.normalizer import normalize_path
from nata.kinship.relation_types import RelationType, label
from nata.models import Gender

logger = logging.getLogger(__name__)

SELF_TERM = "आफै (Self)"
MALE_RELATIVE = "नातेदार (पुरुष)"
FEMALE_RELATIVE = "नातेदार (महिला)"
RELATIVE = "नातेदार"

# Curated two-step compounds, keyed by the comma-joined normalized path.
# Anything not listed here falls back to a generic relative term.
COMPOUND_PATTERNS: dict[str, str] = {
    "ama,mama": "मामा (Mama)",
    "buwa,fupu": "फुपू (Phupu)",
    "buwa,daju": "काका / ठूलो बुवा (Kaka / Thulo Buwa)",
    "buwa,bhai": "काका / ठूलो बुवा (Kaka / Thulo Buwa)",
    "ama,didi": "सानी आमा / ठूली आमा (Sani Aama / Thuli Aama)",
    "ama,bahini": "सानी आमा / ठूली आमा (Sani Aama / Thuli Aama)",
}


class Confidence(str, Enum):
    """How a term was obtained."""
    EXACT = "exact"          # self or a single relation
    PATTERN = "pattern"      # curated multi-step compound
    FALLBACK = "fallback"    # generic gendered relative


@dataclass(frozen=True)
class Resolution:
    term: str
    confidence: Confidence
    normalized_path: tuple[RelationType, ...]


def path_key(types: Sequence[RelationType]) -> str:
    return ",".join(t.value for t in types)


def fallback_term(gender: Gender) -> str:
    if gender == Gender.MALE:
        return MALE_RELATIVE
    if gender == Gender.FEMALE:
        return FEMALE_RELATIVE
    return RELATIVE


class TermResolver:
    """Resolve raw relation paths; never raises for unmapped paths."""

    def __init__(self, patterns: dict[str, str] = None, self_term: str = SELF_TERM):
        self.patterns = dict(COMPOUND_PATTERNS if patterns is None else patterns)
        self.self_term = self_term

    def resolve(self, raw_path: Sequence[RelationType], target_gender: Gender) -> Resolution:
        """Normalize the path, then: self, direct label, curated compound, fallback."""
        path = normalize_path(raw_path)

        if not path:
            return Resolution(self.self_term, Confidence.EXACT, path)

        if len(path) == 1:
            return Resolution(label(path[0]), Confidence.EXACT, path)

        key = path_key(path)
        term = self.patterns.get(key)
        if term:
            return Resolution(term, Confidence.PATTERN, path)

        logger.debug("No compound pattern for %s; using generic term", key)
        return Resolution(fallback_term(target_gender), Confidence.FALLBACK, path)
