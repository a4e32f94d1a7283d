"""Test configuration and common fixtures."""

from datetime import datetime
from typing import Callable

import pytest
from nltk.tokenize.punkt import PunktSentenceTokenizer

from misinfo_guardian.domain.models.article import Article
from misinfo_guardian.domain.models.claim import Claim
from misinfo_guardian.domain.models.config import GuardianConfig
from misinfo_guardian.domain.services.claim_extractor import ClaimExtractor


@pytest.fixture
def config() -> GuardianConfig:
    """Provide a configuration without inter-call delay."""
    return GuardianConfig(request_interval=0.0)


@pytest.fixture
def make_article() -> Callable[..., Article]:
    """Provide a factory for articles."""
    def _make(
        title: str = "City council approves new budget",
        content: str = "The council said the budget grows by 4% next year, according to the mayor.",
        url: str = "https://news.example.com/budget",
        source: str = "Example News",
    ) -> Article:
        return Article.create(
            title=title,
            content=content,
            url=url,
            source=source,
            published_at=datetime(2024, 5, 1, 12, 0),
        )
    return _make


@pytest.fixture
def article(make_article) -> Article:
    """Provide a default article."""
    return make_article()


@pytest.fixture
def make_claim(article) -> Callable[[str], Claim]:
    """Provide a factory for claims on the default article."""
    def _make(text: str) -> Claim:
        return Claim(text=text, context=text, article=article)
    return _make


@pytest.fixture
def claim_extractor(config) -> ClaimExtractor:
    """Provide an extractor with a fixed, data-free sentence tokenizer."""
    return ClaimExtractor(config, tokenizer=PunktSentenceTokenizer())
