"""Tests for dashboard aggregation."""

from datetime import datetime, timezone

from sfc.dashboard import build_dashboard
from sfc.feedback.models import FeedbackRecord, SentimentCategory


def _record(day, category=None, language=None, phrases=()):
    return FeedbackRecord(
        content="feedback text here",
        submission_time=datetime(2024, 6, day, 9, 0, tzinfo=timezone.utc),
        sentiment_category=category,
        language=language,
        key_phrases=list(phrases),
    )


def test_empty_dashboard():
    summary = build_dashboard([])
    assert summary.total_count == 0
    assert summary.submissions_by_day == {}
    assert summary.top_key_phrases == {}


def test_dashboard_counts():
    records = [
        _record(2, SentimentCategory.POSITIVE, "English", ["delivery", "support"]),
        _record(1, SentimentCategory.POSITIVE, "English", ["delivery"]),
        _record(1, SentimentCategory.NEGATIVE, "Polish", ["price"]),
        _record(3, SentimentCategory.NEUTRAL, "English"),
        _record(3),
    ]
    summary = build_dashboard(records)

    assert summary.total_count == 5
    assert summary.positive_count == 2
    assert summary.negative_count == 1
    assert summary.neutral_count == 1
    assert list(summary.submissions_by_day.items()) == [
        ("2024-06-01", 2),
        ("2024-06-02", 1),
        ("2024-06-03", 2),
    ]
    assert list(summary.language_distribution.items()) == [("English", 3), ("Polish", 1)]
    assert summary.top_key_phrases["delivery"] == 2
    assert next(iter(summary.top_key_phrases)) == "delivery"


def test_top_key_phrases_are_limited():
    records = [_record(1, phrases=[f"phrase {i}" for i in range(15)])]
    assert len(build_dashboard(records).top_key_phrases) == 10
    assert len(build_dashboard(records, top_phrases=3).top_key_phrases) == 3
