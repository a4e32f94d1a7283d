"""Domain model for fact checking results."""

from datetime import datetime
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field

from .claim import Claim


class Verdict(str, Enum):
    """Possible fact-check outcomes."""

    TRUE = "TRUE"
    FALSE = "FALSE"
    MIXED = "MIXED"  # Partly true, partly false
    UNVERIFIED = "UNVERIFIED"  # Could not be verified either way
    UNKNOWN = "UNKNOWN"  # Rating could not be interpreted


class FactCheckResult(BaseModel):
    """Result of checking a single claim."""

    claim: Claim = Field(..., description="The claim that was checked")
    verdict: Verdict = Field(..., description="Normalized verdict")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence in the verdict (0-1)")
    sources: Tuple[str, ...] = Field(default=(), description="Supporting source URLs")
    explanation: str = Field(..., description="Human-readable explanation")
    checked_at: datetime = Field(default_factory=datetime.now, description="When the check was completed")
    method: str = Field(default="heuristic", description="Which checker produced the verdict")

    class Config:
        """Pydantic model configuration."""
        frozen = True
