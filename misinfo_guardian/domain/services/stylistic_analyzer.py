"""Service for scoring stylistic misinformation signals."""

import logging
import re

from ..models.article import Article
from ..models.stylistic_analysis import StylisticAnalysis

logger = logging.getLogger(__name__)

UNCERTAINTY_WORDS = (
    "allegedly",
    "supposedly",
    "reportedly",
    "rumored",
    "unconfirmed",
    "believed",
    "might",
    "may",
    "could",
    "possibly",
    "perhaps",
)

EMOTIONAL_WORDS = ("outrage", "scandal", "crisis", "disaster", "devastating")

UNCERTAINTY_FLAG = "High uncertainty language detected"
SENSATIONAL_TITLE_FLAG = "Sensational title detected"
CAPITALIZATION_FLAG = "Excessive capitalization detected"
EMOTIONAL_FLAG = "High emotional language detected"
NO_SOURCES_FLAG = "Lack of cited sources"

UNCERTAINTY_PENALTY = 0.2
SENSATIONAL_TITLE_PENALTY = 0.15
CAPITALIZATION_PENALTY = 0.1
EMOTIONAL_PENALTY = 0.1
NO_SOURCES_PENALTY = 0.2

MAX_UNCERTAINTY_HITS = 5
MAX_CAPS_WORDS = 2
MAX_EMOTIONAL_HITS = 3

_REPEATED_EXCLAMATION = re.compile(r"!{2,}")
_SENSATIONAL_WORDS = re.compile(r"BREAKING|SHOCKING|UNBELIEVABLE", re.IGNORECASE)
_CAPS_WORD = re.compile(r"\b[A-Z]{3,}\b")
_SOURCE_CITATION = re.compile(r"according to|source|research|study|data", re.IGNORECASE)


def count_lexicon_hits(text: str, lexicon) -> int:
    """Count how many distinct lexicon entries occur in the lower-cased text."""
    lowered = text.lower()
    return sum(1 for word in lexicon if word in lowered)


class StylisticAnalyzer:
    """Scores an article on writing-style signals alone.

    Scoring starts at 1.0 and every rule is evaluated independently; each one
    that fires deducts its penalty and adds a flag. The result is clamped to
    [0, 1]. The analysis is deterministic and makes no external calls.
    """

    def has_sensational_title(self, title: str) -> bool:
        """Check the title for repeated exclamation marks or tabloid keywords."""
        return bool(_REPEATED_EXCLAMATION.search(title) or _SENSATIONAL_WORDS.search(title))

    def count_caps_words(self, title: str) -> int:
        """Count distinct all-caps words of at least three letters."""
        return len(set(_CAPS_WORD.findall(title)))

    def cites_sources(self, content: str) -> bool:
        """Check whether the content references any source."""
        return bool(_SOURCE_CITATION.search(content))

    def analyze(self, article: Article) -> StylisticAnalysis:
        """Analyze an article for misinformation-style signals.

        Args:
            article: Article to analyze

        Returns:
            Stylistic score with one flag per fired rule
        """
        score = 1.0
        flags = []

        if count_lexicon_hits(article.content, UNCERTAINTY_WORDS) > MAX_UNCERTAINTY_HITS:
            flags.append(UNCERTAINTY_FLAG)
            score -= UNCERTAINTY_PENALTY

        if self.has_sensational_title(article.title):
            flags.append(SENSATIONAL_TITLE_FLAG)
            score -= SENSATIONAL_TITLE_PENALTY

        if self.count_caps_words(article.title) > MAX_CAPS_WORDS:
            flags.append(CAPITALIZATION_FLAG)
            score -= CAPITALIZATION_PENALTY

        if count_lexicon_hits(article.content, EMOTIONAL_WORDS) > MAX_EMOTIONAL_HITS:
            flags.append(EMOTIONAL_FLAG)
            score -= EMOTIONAL_PENALTY

        if not self.cites_sources(article.content):
            flags.append(NO_SOURCES_FLAG)
            score -= NO_SOURCES_PENALTY

        score = max(0.0, min(1.0, score))
        logger.debug(f"🧮 Stylistic score for '{article.title}': {score:.2f} ({len(flags)} flags)")
        return StylisticAnalysis(score=score, flags=tuple(flags))
