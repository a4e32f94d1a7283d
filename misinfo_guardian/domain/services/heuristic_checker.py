"""Local heuristic fact checker used when no remote verdict is available."""

import logging
import re
from datetime import datetime

from ..models.claim import Claim
from ..models.fact_check_result import FactCheckResult, Verdict

logger = logging.getLogger(__name__)

CONSPIRACY_PHRASES = ("conspiracy", "cover-up", "they don't want you to know")
VERIFICATION_PHRASES = ("study published", "peer-reviewed", "official statement")

CONSPIRACY_FLAG = "Contains conspiracy language"
VERIFICATION_FLAG = "Contains verification indicators"
UNSOURCED_STATISTICS_FLAG = "Contains statistics without clear sources"
DEFAULT_EXPLANATION = "Heuristic analysis - manual verification recommended"

HEURISTIC_METHOD = "heuristic"

_STATISTIC_PATTERN = re.compile(r"[0-9]+%|[0-9]+\s*(million|billion|thousand)")
_SOURCE_PATTERN = re.compile(r"according to|source|research|study")


class HeuristicFactChecker:
    """Phrase-based fact checker.

    The rules run in a fixed order and later rules overwrite the verdict or
    confidence set by earlier ones: conspiracy language, then verification
    indicators, then unsourced statistics.
    """

    def check(self, claim: Claim) -> FactCheckResult:
        """Check a claim with local heuristics only.

        Args:
            claim: Claim to check

        Returns:
            Heuristic fact check result
        """
        text = claim.text.lower()
        confidence = 0.5
        verdict = Verdict.UNVERIFIED
        flags = []

        if any(phrase in text for phrase in CONSPIRACY_PHRASES):
            confidence = 0.3
            verdict = Verdict.FALSE
            flags.append(CONSPIRACY_FLAG)

        if any(phrase in text for phrase in VERIFICATION_PHRASES):
            confidence = 0.7
            verdict = Verdict.TRUE
            flags.append(VERIFICATION_FLAG)

        if _STATISTIC_PATTERN.search(text) and not _SOURCE_PATTERN.search(text):
            confidence = max(0.3, confidence - 0.2)
            flags.append(UNSOURCED_STATISTICS_FLAG)

        return FactCheckResult(
            claim=claim,
            verdict=verdict,
            confidence=confidence,
            sources=[],
            explanation="; ".join(flags) or DEFAULT_EXPLANATION,
            checked_at=datetime.now(),
            method=HEURISTIC_METHOD,
        )
