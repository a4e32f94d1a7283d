"""Article analysis API endpoints."""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...domain.models.article import Article
from ...domain.models.report import MisinformationReport
from ...domain.ports.report_sink import ReportSink
from ...domain.services.guardian_service import GuardianService
from ...infrastructure.dependencies import get_guardian_service, get_report_sink
from ...infrastructure.sinks.memory_sink import InMemoryReportSink

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])


class ArticleRequest(BaseModel):
    """Request model for a single article."""

    title: str = Field(..., description="Article headline")
    content: str = Field(..., description="Article body, HTML is stripped")
    url: str = Field(..., description="Canonical article URL")
    source: str = Field(..., description="Name of the publishing source")
    published_at: Optional[datetime] = Field(None, description="Publish timestamp")
    author: Optional[str] = Field(None, description="Article author")

    def to_article(self) -> Article:
        """Build the normalized domain article."""
        return Article.create(
            title=self.title,
            content=self.content,
            url=self.url,
            source=self.source,
            published_at=self.published_at,
            author=self.author,
        )


class ArticleAnalysisResponse(BaseModel):
    """Response model for a single article."""

    report: Optional[MisinformationReport] = Field(None, description="Report, null when no claims were found")
    flagged: bool = Field(False, description="Whether the score fell below the threshold")


class BatchRequest(BaseModel):
    """Request model for a batch of articles."""

    articles: List[ArticleRequest] = Field(..., description="Articles to analyze")


class BatchResponse(BaseModel):
    """Response model for a batch of articles."""

    reports: List[MisinformationReport] = Field(..., description="Reports for processed articles")
    processed: int = Field(..., description="Number of reports produced")
    flagged: int = Field(..., description="Number of reports below the threshold")


@router.post("/article", response_model=ArticleAnalysisResponse)
async def analyze_article(
    request: ArticleRequest,
    service: GuardianService = Depends(get_guardian_service),
) -> ArticleAnalysisResponse:
    """Analyze a single article.

    Flagged reports are forwarded to the report sink the same way batch
    reports are.
    """
    logger.info(f"Analyzing article: {request.title[:100]}")

    try:
        report = await service.process_article(request.to_article())
        if report is None:
            return ArticleAnalysisResponse(report=None, flagged=False)

        flagged = service.is_flagged(report)
        if flagged:
            await service.publish_report(report)
        return ArticleAnalysisResponse(report=report, flagged=flagged)

    except Exception as e:
        logger.error(f"Error analyzing article: {type(e).__name__}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"{type(e).__name__}: {str(e)}")


@router.post("/batch", response_model=BatchResponse)
async def analyze_batch(
    request: BatchRequest,
    service: GuardianService = Depends(get_guardian_service),
) -> BatchResponse:
    """Analyze a batch of articles sequentially."""
    articles = [item.to_article() for item in request.articles]
    reports = await service.process_batch(articles)
    return BatchResponse(
        reports=reports,
        processed=len(reports),
        flagged=sum(1 for report in reports if service.is_flagged(report)),
    )


@router.get("/reports", response_model=List[MisinformationReport])
async def list_reports(sink: ReportSink = Depends(get_report_sink)) -> List[MisinformationReport]:
    """List reports kept by the in-memory sink."""
    if not isinstance(sink, InMemoryReportSink):
        raise HTTPException(
            status_code=404,
            detail=f"Report sink '{sink.sink_name}' does not keep reports",
        )
    return sink.reports
