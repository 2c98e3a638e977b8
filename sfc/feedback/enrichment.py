"""Text enrichment with per-call fallbacks.

Sentiment, key phrases and language are fetched independently; if a call
fails, only that field falls back to its neutral value and the others still
come from the analyzer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sfc.analysis.base import UNKNOWN_LANGUAGE, SentimentCategory, SentimentResult, TextAnalyzer
from sfc.feedback.models import FeedbackRecord

logger = logging.getLogger(__name__)

NEUTRAL_SENTIMENT = SentimentResult(score=0.5, category=SentimentCategory.NEUTRAL)


@dataclass
class Enrichment:
    """Enrichment values for one piece of text."""

    sentiment_score: float = NEUTRAL_SENTIMENT.score
    sentiment_category: SentimentCategory = NEUTRAL_SENTIMENT.category
    key_phrases: list[str] = field(default_factory=list)
    language: str = UNKNOWN_LANGUAGE
    failures: list[str] = field(default_factory=list)

    def apply_to(self, record: FeedbackRecord) -> FeedbackRecord:
        record.sentiment_score = self.sentiment_score
        record.sentiment_category = self.sentiment_category
        record.key_phrases = list(self.key_phrases)
        record.language = self.language
        return record


def enrich(analyzer: TextAnalyzer, text: str, record_id: str = "") -> Enrichment:
    """Run all three analyses on *text*, substituting defaults for failures."""
    result = Enrichment()

    try:
        sentiment = analyzer.sentiment(text)
        result.sentiment_score = sentiment.score
        result.sentiment_category = sentiment.category
    except Exception as exc:
        logger.warning("Sentiment analysis failed for feedback %s: %s", record_id, exc)
        result.failures.append("sentiment")

    try:
        result.key_phrases = list(analyzer.key_phrases(text))
    except Exception as exc:
        logger.warning("Key phrase extraction failed for feedback %s: %s", record_id, exc)
        result.failures.append("key_phrases")

    try:
        result.language = analyzer.language(text) or UNKNOWN_LANGUAGE
    except Exception as exc:
        logger.warning("Language detection failed for feedback %s: %s", record_id, exc)
        result.failures.append("language")

    return result
