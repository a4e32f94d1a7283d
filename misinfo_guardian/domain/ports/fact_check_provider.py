"""Protocol for remote fact-check providers."""

from typing import List, Optional, Protocol

from pydantic import BaseModel, Field

from ..models.claim import Claim
from ..models.fact_check_result import FactCheckResult


class ClaimReview(BaseModel):
    """A single review record returned by a fact-check oracle."""

    textual_rating: str = Field(..., description="Free-text rating given by the reviewer")
    url: Optional[str] = Field(None, description="URL of the review")
    publisher: Optional[str] = Field(None, description="Name of the reviewing organization")
    title: Optional[str] = Field(None, description="Title of the review")


class FactCheckProvider(Protocol):
    """Protocol for remote fact-check oracles."""

    async def search_reviews(self, query: str) -> List[ClaimReview]:
        """Look up claim reviews matching the query text."""
        ...

    async def lookup(self, claim: Claim) -> Optional[FactCheckResult]:
        """Return a result for the claim, or None when there is no usable match.

        Implementations must not raise on transport failures; they return None
        so the caller can fall back to local analysis.
        """
        ...

    async def shutdown(self) -> None:
        """Clean up resources."""
        ...

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        ...
