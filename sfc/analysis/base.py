"""Capability contracts for text safety and text analysis providers.

Providers raise on genuine unavailability only; ordinary unsafe content is a
normal :class:`~sfc.moderation.models.ModerationResult`, not an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from sfc.moderation.models import ModerationResult

CATEGORIES = ("Hate", "SelfHarm", "Sexual", "Violence")

# Categories at or above this severity are flagged.
DEFAULT_SEVERITY_THRESHOLD = 4

UNKNOWN_LANGUAGE = "Unknown"


class SentimentCategory(str, Enum):
    """Overall sentiment label assigned by text analysis."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass
class SentimentResult:
    """Sentiment label with the analyzer's confidence in it (0.0-1.0)."""

    score: float
    category: SentimentCategory

    def __post_init__(self) -> None:
        if isinstance(self.category, str):
            self.category = SentimentCategory(self.category)


class SafetyClassifier(ABC):
    """Classifies text into harm categories with integer severities."""

    @abstractmethod
    def analyze(self, text: str) -> ModerationResult:
        """Return per-category severities and the flagged set for *text*."""


class TextAnalyzer(ABC):
    """Sentiment, key phrase and language analysis."""

    @abstractmethod
    def sentiment(self, text: str) -> SentimentResult:
        """Return the dominant sentiment of *text*."""

    @abstractmethod
    def key_phrases(self, text: str) -> list[str]:
        """Return the key phrases of *text*, most relevant first."""

    @abstractmethod
    def language(self, text: str) -> str:
        """Return the name of the language *text* is written in."""
