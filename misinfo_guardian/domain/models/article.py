"""Domain model for news articles."""

import hashlib
import re
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


_TAG_PATTERN = re.compile(r"<[^>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def strip_html(html: str) -> str:
    """Strip HTML tags and collapse whitespace."""
    text = _TAG_PATTERN.sub(" ", html)
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def article_id_for(url: str) -> str:
    """Derive the deterministic article identifier from its URL."""
    return hashlib.md5(url.encode("utf-8")).hexdigest()


class Article(BaseModel):
    """A normalized news article handed over by the ingestion side."""

    id: str = Field(..., description="Identifier derived from the article URL")
    title: str = Field(..., description="Article headline")
    content: str = Field(..., description="Plain-text article body")
    url: str = Field(..., description="Canonical article URL")
    source: str = Field(..., description="Name of the publishing source")
    published_at: datetime = Field(default_factory=datetime.now, description="Publish timestamp")
    author: Optional[str] = Field(None, description="Article author if known")

    class Config:
        """Pydantic model configuration."""
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "6f1ed002ab5595859014ebf0951522d9",
                "title": "City council approves new budget",
                "content": "The council said the budget grows by 4% next year.",
                "url": "https://news.example.com/budget",
                "source": "Example News",
                "author": "Jane Doe",
            }
        }

    @model_validator(mode="before")
    @classmethod
    def derive_id(cls, data: Any) -> Any:
        """Fill in the identifier from the URL when it is not given."""
        if isinstance(data, dict) and not data.get("id") and "url" in data:
            return {**data, "id": article_id_for(data["url"])}
        return data

    @model_validator(mode="after")
    def check_id(self) -> "Article":
        """Reject identifiers that do not match the URL."""
        if self.id != article_id_for(self.url):
            raise ValueError(f"Article id {self.id} does not match the hash of {self.url}")
        return self

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        url: str,
        source: str,
        published_at: Optional[datetime] = None,
        author: Optional[str] = None,
    ) -> "Article":
        """Build an article from raw feed fields.

        The identifier is derived from the URL and HTML is stripped from the
        content.

        Args:
            title: Article headline
            content: Raw (possibly HTML) body
            url: Canonical URL
            source: Source name
            published_at: Publish time, defaults to now
            author: Optional author

        Returns:
            Normalized article
        """
        return cls(
            id=article_id_for(url),
            title=title,
            content=strip_html(content),
            url=url,
            source=source,
            published_at=published_at or datetime.now(),
            author=author,
        )
