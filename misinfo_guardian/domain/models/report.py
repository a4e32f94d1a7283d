"""Domain model for misinformation reports."""

from datetime import datetime
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from .article import Article
from .claim import Claim
from .fact_check_result import FactCheckResult


def _attach_article(claim: Any, article: Any) -> Any:
    """Restore the back-reference of a serialized claim."""
    if isinstance(claim, dict) and "article" not in claim:
        return {**claim, "article": article}
    return claim


class MisinformationReport(BaseModel):
    """Outcome of running one article through the analysis pipeline.

    The article is serialized once here. Claims, including the claims inside
    fact-check results, only carry its id and get the article back when a
    serialized report is validated again.
    """

    id: str = Field(..., description="Unique report identifier (128-bit hex)")
    article: Article = Field(..., description="The analyzed article")
    claims: Tuple[Claim, ...] = Field(default=(), description="All extracted claims")
    fact_check_results: Tuple[FactCheckResult, ...] = Field(
        default=(),
        description="Results for the claims that were checked successfully",
    )
    overall_score: float = Field(..., description="Credibility score, 0 = not credible, 1 = fully credible")
    flags: Tuple[str, ...] = Field(default=(), description="Human-readable stylistic flags")
    created_at: datetime = Field(default_factory=datetime.now, description="When the report was created")

    class Config:
        """Pydantic model configuration."""
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def attach_article(cls, data: Any) -> Any:
        """Give serialized claims their article back."""
        if not isinstance(data, dict) or "article" not in data:
            return data

        article = data["article"]
        results = []
        for result in data.get("fact_check_results", ()):
            if isinstance(result, dict) and "claim" in result:
                result = {**result, "claim": _attach_article(result["claim"], article)}
            results.append(result)

        return {
            **data,
            "claims": [_attach_article(claim, article) for claim in data.get("claims", ())],
            "fact_check_results": results,
        }

    @field_validator("overall_score")
    @classmethod
    def clamp_score(cls, value: float) -> float:
        """Keep the overall score within [0, 1]."""
        return max(0.0, min(1.0, value))

    def verdict_summary(self) -> Dict[str, int]:
        """Count fact-check results per verdict."""
        summary: Dict[str, int] = {}
        for result in self.fact_check_results:
            summary[result.verdict.value] = summary.get(result.verdict.value, 0) + 1
        return summary
