"""Service orchestrating the misinformation analysis pipeline."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..models.article import Article
from ..models.config import GuardianConfig
from ..models.report import MisinformationReport
from ..ports.report_sink import ReportSink
from .claim_extractor import ClaimExtractor
from .fact_checking_service import FactCheckingService
from .report_assembler import ReportAssembler
from .score_combiner import ScoreCombiner
from .stylistic_analyzer import StylisticAnalyzer

logger = logging.getLogger(__name__)


class GuardianService:
    """Runs articles through claim extraction, analysis, fact checking and scoring."""

    def __init__(
        self,
        config: GuardianConfig,
        fact_checker: FactCheckingService,
        claim_extractor: Optional[ClaimExtractor] = None,
        stylistic_analyzer: Optional[StylisticAnalyzer] = None,
        score_combiner: Optional[ScoreCombiner] = None,
        report_assembler: Optional[ReportAssembler] = None,
        report_sink: Optional[ReportSink] = None,
    ):
        """Initialize the service.

        Args:
            config: Pipeline configuration
            fact_checker: Fact-check orchestrator
            claim_extractor: Claim extractor, built from the config when omitted
            stylistic_analyzer: Stylistic risk analyzer
            score_combiner: Score combiner
            report_assembler: Report assembler
            report_sink: Receives reports scoring below the threshold, optional
        """
        self._config = config
        self.fact_checker = fact_checker
        self.claim_extractor = claim_extractor or ClaimExtractor(config)
        self.stylistic_analyzer = stylistic_analyzer or StylisticAnalyzer()
        self.score_combiner = score_combiner or ScoreCombiner()
        self.report_assembler = report_assembler or ReportAssembler()
        self.report_sink = report_sink
        logger.info("🛡️ GuardianService initialized")

    async def process_article(self, article: Article) -> Optional[MisinformationReport]:
        """Process a single article.

        Args:
            article: Article to analyze

        Returns:
            The report, or None when the article holds no claims
        """
        logger.info(f"📰 Processing article: {article.title}")

        claims = self.claim_extractor.extract_claims(article)
        if not claims:
            logger.info(f"ℹ️ No claims extracted from article: {article.title}")
            return None

        analysis = self.stylistic_analyzer.analyze(article)
        results = await self.fact_checker.check_claims(claims)
        overall_score = self.score_combiner.combine(analysis.score, results)

        report = self.report_assembler.assemble(
            article=article,
            claims=claims,
            fact_check_results=results,
            flags=analysis.flags,
            overall_score=overall_score,
        )

        logger.info(
            f"📊 Article processed. Score: {report.overall_score:.2f}, Flags: {len(report.flags)}"
        )
        return report

    def is_flagged(self, report: MisinformationReport) -> bool:
        """Check whether a report falls below the confidence threshold."""
        return report.overall_score < self._config.min_confidence_threshold

    async def publish_report(self, report: MisinformationReport) -> Optional[str]:
        """Forward a report to the sink, returning its handle.

        Sink failures are logged and yield None.
        """
        if self.report_sink is None:
            return None

        try:
            logger.info(f"💾 Publishing report for flagged article: {report.article.title}")
            handle = await self.report_sink.publish(report)
            logger.info(f"✅ Report {report.id} published to {self.report_sink.sink_name}: {handle}")
            return handle
        except Exception as e:
            logger.error(f"❌ Error publishing report {report.id}: {e}", exc_info=True)
            return None

    async def process_batch(self, articles: Sequence[Article]) -> List[MisinformationReport]:
        """Process a batch of articles one at a time.

        Articles whose processing raises are logged and skipped; articles
        without claims produce no report. Reports scoring below the threshold
        are forwarded to the report sink.

        Args:
            articles: Normalized articles

        Returns:
            Reports for the processed articles
        """
        logger.info(f"🚀 Starting batch of {len(articles)} articles")
        reports = []

        for article in articles:
            try:
                report = await self.process_article(article)
            except Exception as e:
                logger.error(f"❌ Error processing article {article.title}: {e}", exc_info=True)
                continue

            if report is None:
                continue

            reports.append(report)
            if self.is_flagged(report):
                await self.publish_report(report)

        logger.info(f"🏁 Batch complete. Produced {len(reports)} reports from {len(articles)} articles")
        return reports

    def get_status(self) -> Dict[str, Any]:
        """Describe the active configuration and collaborators."""
        remote = self.fact_checker.remote
        return {
            "min_confidence_threshold": self._config.min_confidence_threshold,
            "remote_fact_check": {
                "enabled": remote is not None,
                "provider": remote.provider_name if remote else None,
            },
            "request_interval": self._config.request_interval,
            "report_sink": self.report_sink.sink_name if self.report_sink else None,
        }
