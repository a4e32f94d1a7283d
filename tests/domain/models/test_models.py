"""Tests for domain models."""

import hashlib
import json

import pytest
from pydantic import ValidationError

from misinfo_guardian.domain.models.article import Article, strip_html
from misinfo_guardian.domain.models.claim import Claim
from misinfo_guardian.domain.models.fact_check_result import FactCheckResult, Verdict
from misinfo_guardian.domain.models.report import MisinformationReport
from misinfo_guardian.domain.models.stylistic_analysis import StylisticAnalysis


def test_article_id_is_md5_of_url(article):
    """Test that the article id is derived from the URL."""
    expected = hashlib.md5(b"https://news.example.com/budget").hexdigest()
    assert article.id == expected


def test_article_id_is_deterministic(make_article):
    """Test that the same URL yields the same id."""
    first = make_article(title="One")
    second = make_article(title="Two")
    assert first.id == second.id
    assert make_article(url="https://news.example.com/other").id != first.id


def test_article_create_strips_html():
    """Test HTML stripping on article creation."""
    article = Article.create(
        title="Title",
        content="<p>Hello <b>world</b></p>\n\n<div>Next   line</div>",
        url="https://example.com/a",
        source="Example",
    )
    assert article.content == "Hello world Next line"
    assert article.author is None
    assert article.published_at is not None


def test_strip_html_plain_text_untouched():
    """Test that plain text only gets whitespace normalized."""
    assert strip_html("  plain   text ") == "plain text"


def test_article_is_immutable(article):
    """Test that articles cannot be mutated."""
    with pytest.raises(ValidationError):
        article.title = "Changed"


def test_fact_check_result_rejects_out_of_range_confidence(make_claim):
    """Test confidence validation."""
    with pytest.raises(ValidationError):
        FactCheckResult(
            claim=make_claim("The budget grows by 4%."),
            verdict=Verdict.TRUE,
            confidence=1.5,
            explanation="Too confident",
        )


def test_fact_check_result_rejects_unknown_verdict(make_claim):
    """Test that only the closed verdict set is accepted."""
    with pytest.raises(ValidationError):
        FactCheckResult(
            claim=make_claim("The budget grows by 4%."),
            verdict="PANTS_ON_FIRE",
            confidence=0.5,
            explanation="Not a verdict",
        )


def test_verdict_set_is_closed():
    """Test the five verdict values."""
    assert {verdict.value for verdict in Verdict} == {"TRUE", "FALSE", "MIXED", "UNVERIFIED", "UNKNOWN"}


def test_stylistic_analysis_validates_score():
    """Test stylistic score validation."""
    with pytest.raises(ValueError):
        StylisticAnalysis(score=-0.1)


@pytest.mark.parametrize("score, expected", [(1.7, 1.0), (-0.3, 0.0), (0.42, 0.42)])
def test_report_score_is_clamped(article, score, expected):
    """Test that the overall score is clamped to [0, 1]."""
    report = MisinformationReport(id="abc", article=article, overall_score=score)
    assert report.overall_score == expected


def test_report_verdict_summary(article, make_claim):
    """Test verdict counting."""
    claim = make_claim("The budget grows by 4%.")
    results = [
        FactCheckResult(claim=claim, verdict=Verdict.TRUE, confidence=0.8, explanation="ok"),
        FactCheckResult(claim=claim, verdict=Verdict.TRUE, confidence=0.7, explanation="ok"),
        FactCheckResult(claim=claim, verdict=Verdict.FALSE, confidence=0.3, explanation="no"),
    ]
    report = MisinformationReport(
        id="abc",
        article=article,
        claims=[claim],
        fact_check_results=results,
        overall_score=0.5,
    )
    assert report.verdict_summary() == {"TRUE": 2, "FALSE": 1}


def test_article_rejects_id_not_derived_from_url():
    """Test that the identifier must be the hash of the URL."""
    with pytest.raises(ValidationError):
        Article(
            id="not-a-hash",
            title="Budget",
            content="The budget grows.",
            url="https://news.example.com/budget",
            source="Example News",
        )


def test_article_id_filled_from_url():
    """Test that a missing identifier is derived from the URL."""
    article = Article(title="Budget", content="", url="https://news.example.com/budget", source="Example News")
    assert article.id == hashlib.md5(b"https://news.example.com/budget").hexdigest()


def test_claim_serializes_article_id_only(article, make_claim):
    """Test that a claim refers to its article by id when serialized."""
    data = make_claim("The budget grows by 4%.").model_dump()

    assert "article" not in data
    assert data["article_id"] == article.id


def test_report_serializes_article_once(make_article):
    """Test that serialized size grows linearly with the number of claims."""
    body = "The council said the budget grows. " * 150
    article = make_article(content=body)
    claims = [
        Claim(text=f"The budget grows by {index}%.", context="The budget grows.", article=article)
        for index in range(50)
    ]
    results = [
        FactCheckResult(claim=claim, verdict=Verdict.UNVERIFIED, confidence=0.5, explanation="unsure")
        for claim in claims
    ]
    report = MisinformationReport(
        id="abc",
        article=article,
        claims=claims,
        fact_check_results=results,
        overall_score=0.5,
    )

    document = json.dumps(report.model_dump(mode="json"))

    assert document.count(article.content) == 1
    assert len(document) < len(article.content) + 50 * 1000


def test_report_round_trips_through_json(article, make_claim):
    """Test that validating a serialized report restores claim back-references."""
    claim = make_claim("The budget grows by 4%.")
    result = FactCheckResult(claim=claim, verdict=Verdict.TRUE, confidence=0.8, explanation="ok")
    report = MisinformationReport(
        id="abc",
        article=article,
        claims=[claim],
        fact_check_results=[result],
        overall_score=0.7,
        flags=["Lack of cited sources"],
    )

    restored = MisinformationReport.model_validate(report.model_dump(mode="json"))

    assert restored.claims[0].article == article
    assert restored.fact_check_results[0].claim.article == article
    assert restored.fact_check_results[0].claim.text == claim.text


def test_report_collections_are_immutable(article, make_claim):
    """Test that report contents cannot be changed after construction."""
    report = MisinformationReport(
        id="abc",
        article=article,
        claims=[make_claim("The budget grows by 4%.")],
        overall_score=0.5,
        flags=["Lack of cited sources"],
    )

    assert isinstance(report.claims, tuple)
    with pytest.raises(AttributeError):
        report.flags.append("Edited")


def test_stylistic_flags_are_immutable():
    """Test that analysis flags cannot be changed after construction."""
    analysis = StylisticAnalysis(score=0.5, flags=("Lack of cited sources",))
    with pytest.raises(AttributeError):
        analysis.flags.append("Edited")
