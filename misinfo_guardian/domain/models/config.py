"""Configuration consumed by the analysis pipeline."""

from typing import Optional

from pydantic import BaseModel, Field


class GuardianConfig(BaseModel):
    """Immutable pipeline configuration, built once at startup."""

    min_confidence_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Reports scoring below this are forwarded to the report sink",
    )
    google_fact_check_api_key: Optional[str] = Field(
        default=None,
        description="Google Fact Check Tools API key; remote checks are disabled without it",
    )
    request_interval: float = Field(
        default=1.0,
        ge=0.0,
        description="Delay in seconds between consecutive fact-check calls",
    )
    request_timeout: float = Field(default=10.0, gt=0.0, description="Remote fact-check timeout in seconds")
    cache_ttl: int = Field(default=3600, description="Remote response cache TTL in seconds")
    cache_maxsize: int = Field(default=1000, description="Maximum remote response cache size")
    context_window: int = Field(default=100, ge=0, description="Characters of context kept around a claim")
    language: str = Field(default="english", description="Language used for sentence segmentation")
    fact_check_language_code: Optional[str] = Field(
        default=None,
        description="BCP-47 code restricting remote fact-check reviews to one language",
    )
    report_sink_url: Optional[str] = Field(
        default=None,
        description="Endpoint receiving flagged reports; an in-memory sink is used when unset",
    )
    log_level: str = Field(default="INFO", description="Logging level for entry points")

    class Config:
        """Pydantic model configuration."""
        frozen = True

    @property
    def remote_fact_check_enabled(self) -> bool:
        """Whether a remote fact-check credential is configured."""
        return bool(self.google_fact_check_api_key)
