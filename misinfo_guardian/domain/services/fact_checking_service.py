"""Service for coordinating fact checking between remote and local checkers."""

import asyncio
import logging
from typing import List, Optional, Sequence

from ..models.claim import Claim
from ..models.config import GuardianConfig
from ..models.fact_check_result import FactCheckResult, Verdict
from ..ports.fact_check_provider import FactCheckProvider
from .heuristic_checker import HeuristicFactChecker

logger = logging.getLogger(__name__)

# Checked in this order; the first group that matches wins
_RATING_KEYWORDS = (
    (Verdict.TRUE, ("true", "correct", "accurate")),
    (Verdict.FALSE, ("false", "incorrect", "wrong")),
    (Verdict.MIXED, ("mixed", "partly", "mostly")),
    (Verdict.UNVERIFIED, ("unverified", "unproven")),
)


def normalize_verdict(textual_rating: str) -> Verdict:
    """Map a free-text rating onto the closed verdict set.

    Args:
        textual_rating: Rating as published by the reviewer

    Returns:
        Normalized verdict, UNKNOWN when nothing matches
    """
    rating = textual_rating.lower()
    for verdict, keywords in _RATING_KEYWORDS:
        if any(keyword in rating for keyword in keywords):
            return verdict
    return Verdict.UNKNOWN


class FactCheckingService:
    """Service for coordinating fact checking."""

    def __init__(
        self,
        config: Optional[GuardianConfig] = None,
        remote_provider: Optional[FactCheckProvider] = None,
        heuristic_checker: Optional[HeuristicFactChecker] = None,
    ):
        """Initialize the service.

        Args:
            config: Pipeline configuration
            remote_provider: Remote fact-check oracle, optional
            heuristic_checker: Local fallback checker
        """
        self._config = config or GuardianConfig()
        self.remote = remote_provider
        self.heuristic = heuristic_checker or HeuristicFactChecker()
        mode = self.remote.provider_name if self.remote else "heuristic only"
        logger.info(f"🔧 FactCheckingService initialized ({mode})")

    async def check_claim(self, claim: Claim) -> FactCheckResult:
        """Check a single claim.

        The remote provider is asked first when configured; no match or any
        failure falls back to the heuristic checker.

        Args:
            claim: Claim to check

        Returns:
            Fact check result
        """
        logger.info(f"🔍 Checking claim: {claim.text[:100]}...")

        if self.remote:
            try:
                result = await self.remote.lookup(claim)
                if result:
                    return result
            except Exception as e:
                logger.warning(f"⚠️ {self.remote.provider_name} lookup failed, using fallback: {e}")

        return self.heuristic.check(claim)

    async def check_claims(self, claims: Sequence[Claim]) -> List[FactCheckResult]:
        """Check claims sequentially, pausing between calls.

        A claim whose check raises is logged and skipped, so the result may
        hold fewer entries than the input.

        Args:
            claims: Claims in extraction order

        Returns:
            Results in the same order as the checked claims
        """
        results = []

        for i, claim in enumerate(claims):
            if i > 0 and self._config.request_interval > 0:
                await asyncio.sleep(self._config.request_interval)

            try:
                results.append(await self.check_claim(claim))
            except Exception as e:
                logger.error(f"❌ Error checking claim '{claim.text[:100]}': {e}", exc_info=True)

        logger.info(f"✅ Checked {len(results)}/{len(claims)} claims")
        return results
