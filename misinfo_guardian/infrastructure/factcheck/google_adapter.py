"""Google Fact Check Tools implementation of the fact-check provider interface."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from cachetools import TTLCache
from pydantic import BaseModel, Field

from ...domain.models.claim import Claim
from ...domain.models.fact_check_result import FactCheckResult
from ...domain.ports.fact_check_provider import ClaimReview, FactCheckProvider
from ...domain.services.fact_checking_service import normalize_verdict

logger = logging.getLogger(__name__)

GOOGLE_METHOD = "google_fact_check"


class GoogleFactCheckConfig(BaseModel):
    """Configuration for the Google Fact Check adapter."""

    api_key: str = Field(..., description="Google Fact Check Tools API key")
    base_url: str = Field(
        default="https://factchecktools.googleapis.com/v1alpha1",
        description="Fact Check Tools API base URL",
    )
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    cache_ttl: int = Field(default=3600, description="Cache TTL in seconds")
    cache_maxsize: int = Field(default=1000, description="Maximum cache size")
    # The API exposes no confidence value, so every remote verdict gets the same one
    confidence: float = Field(default=0.8, description="Confidence assigned to remote verdicts")
    language_code: Optional[str] = Field(default=None, description="Restrict reviews to a language")


class GoogleFactCheckAdapter(FactCheckProvider):
    """Looks claims up in the Google Fact Check Tools claim search.

    Only the first review of the first matching claim is used. Transport,
    HTTP and parsing errors are logged and reported as "no match" so callers
    can fall back to local analysis.
    """

    def __init__(
        self,
        config: GoogleFactCheckConfig,
        provider_name: str = "Google Fact Check",
    ):
        """Initialize the adapter.

        Args:
            config: Adapter configuration
            provider_name: Name of the provider
        """
        self._config = config
        self._name = provider_name
        self._client: Optional[httpx.AsyncClient] = None
        self._cache = TTLCache(
            maxsize=self._config.cache_maxsize,
            ttl=self._config.cache_ttl,
        )

    async def initialize(self) -> None:
        """Create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
            )

    async def search_reviews(self, query: str) -> List[ClaimReview]:
        """Search claim reviews for a query.

        Args:
            query: Claim text

        Returns:
            Reviews of the first matching claim, empty when nothing matched

        Raises:
            httpx.HTTPError: On transport or HTTP status errors
        """
        cache_key = f"search:{self._config.language_code}:{query}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        await self.initialize()

        params = {"query": query, "key": self._config.api_key}
        if self._config.language_code:
            params["languageCode"] = self._config.language_code

        response = await self._client.get("/claims:search", params=params)
        response.raise_for_status()
        reviews = self._parse_reviews(response.json())

        self._cache[cache_key] = reviews
        return reviews

    def _parse_reviews(self, payload: Dict[str, Any]) -> List[ClaimReview]:
        """Extract the reviews of the first claim in a search response."""
        claims = payload.get("claims") or []
        if not claims:
            return []

        reviews = []
        for review in claims[0].get("claimReview") or []:
            rating = review.get("textualRating")
            if not rating:
                continue
            reviews.append(
                ClaimReview(
                    textual_rating=rating,
                    url=review.get("url"),
                    publisher=(review.get("publisher") or {}).get("name"),
                    title=review.get("title"),
                )
            )
        return reviews

    async def lookup(self, claim: Claim) -> Optional[FactCheckResult]:
        """Look a claim up and convert the first review into a result.

        Args:
            claim: Claim to look up

        Returns:
            Fact check result, or None on no match or failure
        """
        try:
            reviews = await self.search_reviews(claim.text)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"⚠️ Error calling Google Fact Check API: {e}")
            return None

        if not reviews:
            logger.info("📭 No Google Fact Check review found for claim")
            return None

        review = reviews[0]
        return FactCheckResult(
            claim=claim,
            verdict=normalize_verdict(review.textual_rating),
            confidence=self._config.confidence,
            sources=[review.url] if review.url else [],
            explanation=review.textual_rating,
            checked_at=datetime.now(),
            method=GOOGLE_METHOD,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return self._name

    @property
    def is_available(self) -> bool:
        """Check if the provider has a credential configured."""
        return bool(self._config.api_key)
