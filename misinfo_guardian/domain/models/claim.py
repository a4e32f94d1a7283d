"""Domain model for factual claims."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from .article import Article


class Claim(BaseModel):
    """A sentence extracted from an article as a candidate factual assertion.

    The article is a back-reference only. It is left out of serialized
    claims, which carry the article id instead.
    """

    text: str = Field(..., description="The extracted sentence")
    context: str = Field(..., description="Text surrounding the sentence in the article")
    article: Article = Field(..., exclude=True, description="Article the claim was extracted from")
    extracted_at: datetime = Field(default_factory=datetime.now, description="When the claim was extracted")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model

    @computed_field
    @property
    def article_id(self) -> str:
        """Identifier of the source article."""
        return self.article.id
