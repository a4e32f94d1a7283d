"""Combines stylistic and fact-check signals into one credibility score."""

from typing import Sequence

from ..models.fact_check_result import FactCheckResult, Verdict

STYLISTIC_WEIGHT = 0.4
FACT_CHECK_WEIGHT = 0.6


def directional_score(result: FactCheckResult) -> float:
    """Express a result as a credibility contribution in [0, 1]."""
    if result.verdict == Verdict.FALSE:
        return 1 - result.confidence
    if result.verdict == Verdict.MIXED:
        return 0.5
    return result.confidence


class ScoreCombiner:
    """Weighted blend of the stylistic score and the average fact-check score."""

    def combine(self, stylistic_score: float, results: Sequence[FactCheckResult]) -> float:
        """Combine the stylistic score with fact-check results.

        Args:
            stylistic_score: Score from the stylistic analyzer
            results: Fact check results for the article's claims

        Returns:
            Combined credibility score; the stylistic score when there are no results
        """
        if not results:
            return stylistic_score

        average = sum(directional_score(result) for result in results) / len(results)
        return stylistic_score * STYLISTIC_WEIGHT + average * FACT_CHECK_WEIGHT
