"""
PhrasingAgent - optional LLM phrasing of a resolved relationship.

The rule-based term is always computed first; this agent only offers a more
natural answer and is bypassed on any failure.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from nata.agents.llm_client import LLMClient
from nata.config import settings
from nata.kinship.errors import AugmenterUnavailable
from nata.kinship.normalizer import normalize_path
from nata.kinship.relation_types import RelationType, label
from nata.models import Gender, Person

logger = logging.getLogger(__name__)


MAPPING_RULES = (
    "REQUIRED MAPPING RULES:\n"
    "1. Primary: Aama/Buwa <-> Chora/Chori, Dai/Bhai <-> Didi/Bahini.\n"
    "2. Maternal: Mama/Maiju <-> Bhanja/Bhanji (Sister's kids). "
    "Sani-aama/Thuli-aama (Mother's sister) <-> her sister's kids.\n"
    "3. Paternal: Kaka/Thulobuwa <-> Bhatijo/Bhatiji (Brother's kids). "
    "Phupu/Phupaju <-> Bhada/Bhadai (Brother's kids see Father's sister as Phupu).\n"
    "4. In-Laws: Sasura <-> Jwain (Son-in-law). Sasu <-> Buhari (Daughter-in-law). "
    "Jethan/Salo/Sali <-> Bhena/Jwain.\n"
    "5. Generations: Hajurama/Baje <-> Nati/Natini. Jyu-jyu Baje <-> Pan-nati.\n"
)


@dataclass(frozen=True)
class PhrasingRequest:
    """Everything the phrasing service sees about one query."""
    people: tuple[Person, ...]          # source first, target last
    relation_types: tuple[RelationType, ...]  # raw, not normalized
    target_gender: Gender
    term: str                            # rule-based answer


@dataclass(frozen=True)
class PhrasingOutcome:
    text: str
    phrased: bool
    attempts: int
    error: Optional[str] = None


class PhrasingAgent:
    """
    Phrasing Agent - asks an LLM for the customary Nepali term.

    Flow:
    1. Build the kinship-expert prompt from the path
    2. Call the LLM under a timeout
    3. On failure wait a short backoff and try once more
    4. Otherwise return the rule-based term unchanged
    """

    def __init__(self, llm=None, timeout: Optional[float] = None,
                 retry_backoff: Optional[float] = None):
        cfg = settings.phrasing
        self.llm = llm or LLMClient(provider=cfg.provider, model=cfg.model or None)
        self.timeout = cfg.timeout_seconds if timeout is None else timeout
        self.retry_backoff = cfg.retry_backoff_seconds if retry_backoff is None else retry_backoff
        self.temperature = cfg.temperature
        self.max_tokens = cfg.max_tokens

    def build_prompt(self, request: PhrasingRequest) -> str:
        source = request.people[0]
        target = request.people[-1]
        normalized = normalize_path(request.relation_types)

        prompt = ("You are a high-level Nepali Kinship Expert. Determine the exact "
                  "relationship term for Person B relative to Person A based on the "
                  "following rules:\n\n")
        prompt += MAPPING_RULES + "\n"
        prompt += "CONTEXT:\n"
        prompt += f"- Person A (Source): {source.name} (Gender: {source.gender.value})\n"
        prompt += f"- Person B (Target): {target.name} (Gender: {request.target_gender.value})\n"
        prompt += f"- Step-by-step path: {' -> '.join(label(t) for t in normalized)}\n"
        prompt += f"- Rule-based answer: {request.term}\n\n"
        prompt += "INSTRUCTION:\n"
        prompt += ('Return ONLY the specific Nepali term and its common English '
                   'transliteration. Format: "Term (Transliteration)". Do not explain.')
        return prompt

    async def phrase(self, request: PhrasingRequest) -> str:
        """Single LLM call. Raises AugmenterUnavailable on error or empty text."""
        result = await self.llm.generate(
            self.build_prompt(request),
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )
        if not result.get("success"):
            raise AugmenterUnavailable(result.get("error") or "phrasing call failed")

        text = (result.get("text") or "").strip()
        if not text:
            raise AugmenterUnavailable("phrasing service returned no text")
        return text

    async def augment(self, request: PhrasingRequest, timeout: Optional[float] = None) -> PhrasingOutcome:
        """
        Phrase with one retry; fall back to the rule-based term.

        `timeout` bounds the whole call, retry and backoff included. The
        retry is skipped when the backoff would not fit in what is left.
        """
        timeout = self.timeout if timeout is None else timeout
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        error = None
        attempt = 0

        while attempt < 2:
            attempt += 1
            remaining = deadline - loop.time()
            try:
                text = await asyncio.wait_for(self.phrase(request), timeout=max(remaining, 0))
                return PhrasingOutcome(text, True, attempt)
            except asyncio.TimeoutError:
                error = f"timed out after {timeout}s"
            except AugmenterUnavailable as e:
                error = str(e)
            except Exception as e:
                error = f"{type(e).__name__}: {e}"

            logger.warning("Phrasing attempt %d failed: %s", attempt, error)
            if attempt == 1:
                if deadline - loop.time() <= self.retry_backoff:
                    break
                await asyncio.sleep(self.retry_backoff)

        return PhrasingOutcome(request.term, False, attempt, error)

    async def phrase_result(self, result, people: tuple[Person, ...],
                            timeout: Optional[float] = None) -> PhrasingOutcome:
        """Augment a resolved KinshipResult; `people` are the persons on its path."""
        request = PhrasingRequest(
            people=people,
            relation_types=result.path,
            target_gender=people[-1].gender,
            term=result.term,
        )
        return await self.augment(request, timeout=timeout)
