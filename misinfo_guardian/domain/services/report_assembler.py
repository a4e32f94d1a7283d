"""Builds misinformation reports."""

import secrets
from datetime import datetime
from typing import Sequence

from ..models.article import Article
from ..models.claim import Claim
from ..models.fact_check_result import FactCheckResult
from ..models.report import MisinformationReport


def generate_report_id() -> str:
    """Generate a random 128-bit report identifier as hex."""
    return secrets.token_hex(16)


class ReportAssembler:
    """Packages pipeline outputs into an immutable report."""

    def assemble(
        self,
        article: Article,
        claims: Sequence[Claim],
        fact_check_results: Sequence[FactCheckResult],
        flags: Sequence[str],
        overall_score: float,
    ) -> MisinformationReport:
        """Assemble a report with a fresh identifier and the current time."""
        return MisinformationReport(
            id=generate_report_id(),
            article=article,
            claims=tuple(claims),
            fact_check_results=tuple(fact_check_results),
            overall_score=overall_score,
            flags=tuple(flags),
            created_at=datetime.now(),
        )
