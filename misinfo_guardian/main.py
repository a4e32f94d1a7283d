"""Main script for running the misinformation guardian over a batch of articles."""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import List

from .domain.models.article import Article
from .domain.models.report import MisinformationReport
from .infrastructure.dependencies import ServiceContainer
from .infrastructure.config import load_config

logger = logging.getLogger(__name__)


def load_articles(path: Path) -> List[Article]:
    """Load articles from a JSON file holding a list of raw article objects."""
    raw_articles = json.loads(path.read_text(encoding="utf-8"))
    return [
        Article.create(
            title=item["title"],
            content=item.get("content", ""),
            url=item["url"],
            source=item.get("source", path.stem),
            published_at=item.get("published_at"),
            author=item.get("author"),
        )
        for item in raw_articles
    ]


def print_reports(reports: List[MisinformationReport], threshold: float) -> None:
    """Print a per-article and a batch summary."""
    print("\n" + "=" * 80)
    print("ANALYSIS RESULTS")
    print("=" * 80 + "\n")

    if not reports:
        print("No articles processed.")
        return

    for index, report in enumerate(reports, 1):
        print(f"\n[{index}] {report.article.title}")
        print(f"    Source: {report.article.source}")
        print(f"    URL: {report.article.url}")
        print(f"    Credibility Score: {report.overall_score:.1%}")
        print(f"    Claims Extracted: {len(report.claims)}")
        print(f"    Fact Checks: {len(report.fact_check_results)}")

        if report.flags:
            print("    ⚠️  Flags:")
            for flag in report.flags:
                print(f"       - {flag}")

        verdicts = report.verdict_summary()
        if verdicts:
            print(f"    Verdicts: {json.dumps(verdicts)}")

    flagged = sum(1 for report in reports if report.overall_score < threshold)
    average = sum(report.overall_score for report in reports) / len(reports)

    print("\n" + "=" * 80)
    print("\nSummary:")
    print(f"  Total articles: {len(reports)}")
    print(f"  Flagged for review: {flagged}")
    print(f"  Average credibility: {average:.1%}")


async def main(argv=None):
    """Run one analysis batch."""
    parser = argparse.ArgumentParser(description="Score the credibility of news articles")
    parser.add_argument("articles", type=Path, help="JSON file with a list of articles")
    args = parser.parse_args(argv)

    config = load_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    container = ServiceContainer(config)
    try:
        articles = load_articles(args.articles)
        logger.info(f"📥 Loaded {len(articles)} articles from {args.articles}")
        reports = await container.get_guardian_service().process_batch(articles)
        print_reports(reports, config.min_confidence_threshold)
    finally:
        await container.shutdown()


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
