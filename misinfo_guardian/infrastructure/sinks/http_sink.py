"""HTTP report sink forwarding flagged reports to a storage service."""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, Field

from ...domain.models.report import MisinformationReport
from ...domain.ports.report_sink import ReportSink

logger = logging.getLogger(__name__)


class HttpSinkConfig(BaseModel):
    """Configuration for the HTTP report sink."""

    url: str = Field(..., description="Endpoint receiving report documents")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra request headers")


def report_document(report: MisinformationReport) -> Dict[str, Any]:
    """Serialize a report into the document posted to the storage service."""
    return {
        "@context": "https://schema.org",
        "@type": "ClaimReview",
        "@id": f"urn:misinfo-guardian:report:{report.id}",
        "dateCreated": report.created_at.isoformat(),
        "itemReviewed": {
            "@type": "NewsArticle",
            "identifier": report.article.id,
            "headline": report.article.title,
            "url": report.article.url,
            "publisher": report.article.source,
            "datePublished": report.article.published_at.isoformat(),
        },
        "reviewRating": {
            "@type": "Rating",
            "ratingValue": report.overall_score,
            "bestRating": 1,
            "worstRating": 0,
        },
        "flags": list(report.flags),
        "verdicts": report.verdict_summary(),
        "report": report.model_dump(mode="json"),
    }


class HttpReportSink(ReportSink):
    """Posts report documents to a storage service over HTTP."""

    def __init__(self, config: HttpSinkConfig):
        """Initialize the sink.

        Args:
            config: Sink configuration
        """
        self._config = config
        self._client: Optional[httpx.AsyncClient] = None

    async def publish(self, report: MisinformationReport) -> str:
        """Post a report.

        Args:
            report: Report to publish

        Returns:
            Handle from the service response ("UAL" or "id"), or the report id

        Raises:
            httpx.HTTPError: On transport or HTTP status errors
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                headers={"Content-Type": "application/json", **self._config.headers},
            )

        response = await self._client.post(self._config.url, json=report_document(report))
        response.raise_for_status()

        try:
            body = response.json()
        except ValueError:
            body = {}
        if isinstance(body, dict):
            return str(body.get("UAL") or body.get("id") or report.id)
        return report.id

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def sink_name(self) -> str:
        """Get the sink name."""
        return "http"
