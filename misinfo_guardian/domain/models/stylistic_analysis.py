"""Domain model for stylistic risk analysis results."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class StylisticAnalysis:
    """Credibility estimate derived purely from writing-style signals."""

    score: float
    flags: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate the score range."""
        if not 0 <= self.score <= 1:
            raise ValueError("Stylistic score must be between 0 and 1")
