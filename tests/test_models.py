"""Tests for SFC data models."""

import uuid
from datetime import datetime, timezone

from sfc.feedback.models import FeedbackRecord, ReviewState, SentimentCategory


def test_feedback_record_defaults():
    record = FeedbackRecord(content="Great service overall")
    assert uuid.UUID(record.id)
    assert record.submission_time.tzinfo is not None
    assert record.sentiment_score is None
    assert record.sentiment_category is None
    assert record.key_phrases == []
    assert record.is_content_safe is True
    assert record.requires_review is False
    assert record.is_approved is True
    assert record.review_notes == ""
    assert record.state == ReviewState.APPROVED
    assert record.is_enriched is False


def test_feedback_record_ids_are_unique():
    assert FeedbackRecord(content="one").id != FeedbackRecord(content="two").id


def test_feedback_record_states():
    pending = FeedbackRecord(content="x", requires_review=True, is_approved=False)
    rejected = FeedbackRecord(content="x", requires_review=False, is_approved=False)
    assert pending.state == ReviewState.PENDING
    assert rejected.state == ReviewState.REJECTED


def test_feedback_record_dict_roundtrip():
    record = FeedbackRecord(
        content="Checkout was quick",
        submission_time=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        sentiment_score=0.8,
        sentiment_category=SentimentCategory.POSITIVE,
        key_phrases=["checkout"],
        language="English",
    )
    data = record.to_dict()
    assert data["sentiment_category"] == "Positive"
    assert data["submission_time"] == "2024-05-01T12:30:00+00:00"

    restored = FeedbackRecord.from_dict(data)
    assert restored == record
    assert restored.sentiment_category is SentimentCategory.POSITIVE


def test_feedback_record_from_dict_ignores_unknown_keys():
    restored = FeedbackRecord.from_dict(
        {"id": "abc", "content": "hello there", "_etag": "xyz", "key_phrases": None}
    )
    assert restored.id == "abc"
    assert restored.key_phrases == []
