"""Dashboard aggregation over the stored feedback."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from sfc.analysis.base import SentimentCategory
from sfc.feedback.models import FeedbackRecord

TOP_KEY_PHRASES = 10


@dataclass
class DashboardSummary:
    """Aggregated figures for the feedback dashboard."""

    total_count: int = 0
    positive_count: int = 0
    neutral_count: int = 0
    negative_count: int = 0
    submissions_by_day: dict[str, int] = field(default_factory=dict)
    language_distribution: dict[str, int] = field(default_factory=dict)
    top_key_phrases: dict[str, int] = field(default_factory=dict)


def build_dashboard(
    records: Iterable[FeedbackRecord], top_phrases: int = TOP_KEY_PHRASES
) -> DashboardSummary:
    records = list(records)
    sentiments = Counter(r.sentiment_category for r in records if r.sentiment_category)

    by_day = Counter(r.submission_time.date().isoformat() for r in records)
    languages = Counter(r.language for r in records if r.language)
    phrases = Counter(p for r in records for p in r.key_phrases)

    return DashboardSummary(
        total_count=len(records),
        positive_count=sentiments[SentimentCategory.POSITIVE],
        neutral_count=sentiments[SentimentCategory.NEUTRAL],
        negative_count=sentiments[SentimentCategory.NEGATIVE],
        submissions_by_day=dict(sorted(by_day.items())),
        language_distribution=dict(languages.most_common()),
        top_key_phrases=dict(phrases.most_common(top_phrases)),
    )
