"""Service for extracting candidate factual claims from articles."""

import logging
import re
from datetime import datetime
from typing import List, Optional

from nltk.tokenize.punkt import PunktSentenceTokenizer, PunktTokenizer

from ..models.article import Article
from ..models.claim import Claim
from ..models.config import GuardianConfig

logger = logging.getLogger(__name__)

# Reporting verbs and evidentiary phrases that usually introduce a factual claim
CLAIM_INDICATORS = (
    "said",
    "says",
    "reported",
    "announced",
    "confirmed",
    "revealed",
    "claimed",
    "stated",
    "according to",
    "research shows",
    "studies show",
    "data shows",
    "statistics show",
    "experts say",
    "scientists found",
)

_NUMBER_PATTERN = re.compile(r"[0-9]+")


def load_sentence_tokenizer(language: str = "english") -> PunktSentenceTokenizer:
    """Load the Punkt sentence tokenizer for a language.

    Uses the trained NLTK model when its data is installed and falls back to
    an untrained Punkt tokenizer otherwise. Nothing is downloaded.
    """
    try:
        return PunktTokenizer(language)
    except LookupError:
        logger.info(f"📦 No trained Punkt model for {language} - using untrained sentence tokenizer")
        return PunktSentenceTokenizer()


class ClaimExtractor:
    """Splits article content into sentences and keeps the claim-like ones."""

    def __init__(
        self,
        config: Optional[GuardianConfig] = None,
        tokenizer: Optional[PunktSentenceTokenizer] = None,
    ):
        """Initialize the extractor.

        Args:
            config: Pipeline configuration
            tokenizer: Sentence tokenizer, loaded for the configured language when omitted
        """
        self._config = config or GuardianConfig()
        self._tokenizer = tokenizer or load_sentence_tokenizer(self._config.language)

    def split_sentences(self, text: str) -> List[str]:
        """Segment text into sentences."""
        return [sentence.strip() for sentence in self._tokenizer.tokenize(text) if sentence.strip()]

    def is_claim(self, sentence: str) -> bool:
        """Check whether a sentence looks like a factual assertion.

        Numeric content alone qualifies, statistics being common carriers of
        unverifiable claims.
        """
        lowered = sentence.lower()
        if any(indicator in lowered for indicator in CLAIM_INDICATORS):
            return True
        return bool(_NUMBER_PATTERN.search(sentence))

    def get_context(self, sentence: str, full_text: str) -> str:
        """Get the text surrounding the first occurrence of a sentence.

        Returns the sentence itself when it cannot be found verbatim.
        """
        index = full_text.find(sentence)
        if index == -1:
            return sentence

        window = self._config.context_window
        start = max(0, index - window)
        end = min(len(full_text), index + len(sentence) + window)
        return full_text[start:end]

    def extract_claims(self, article: Article) -> List[Claim]:
        """Extract candidate claims in sentence order.

        Args:
            article: Article to analyze

        Returns:
            Claims referencing the article
        """
        claims = []
        for sentence in self.split_sentences(article.content):
            if not self.is_claim(sentence):
                continue
            claims.append(
                Claim(
                    text=sentence,
                    context=self.get_context(sentence, article.content),
                    article=article,
                    extracted_at=datetime.now(),
                )
            )

        logger.info(f"📝 Extracted {len(claims)} claims from article: {article.title}")
        return claims
