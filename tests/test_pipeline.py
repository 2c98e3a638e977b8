"""Tests for the submission pipeline."""

import pytest

from sfc.errors import InvalidFeedbackError, RateLimitedError
from sfc.feedback.models import ReviewState, SentimentCategory
from sfc.feedback.pipeline import SubmissionPipeline

from conftest import FakeAnalyzer, FakeClassifier, FlakyStore


def _pipeline(store, classifier, analyzer, sleeps=None, **kwargs):
    sleep = sleeps.append if sleeps is not None else (lambda _: None)
    return SubmissionPipeline(store, classifier, analyzer, retry_delay=1.0, sleep=sleep, **kwargs)


def test_safe_submission_is_published_and_enriched(store, safe_classifier, analyzer):
    record = _pipeline(store, safe_classifier, analyzer).submit("The checkout flow was smooth")

    assert record.requires_review is False
    assert record.is_approved is True
    assert record.is_content_safe is True
    assert record.moderation_category is None
    assert record.sentiment_score == 0.92
    assert record.sentiment_category == SentimentCategory.POSITIVE
    assert record.key_phrases == ["checkout flow", "support"]
    assert record.language == "English"
    assert store.get_by_id(record.id) == record


def test_unsafe_submission_is_held_without_enrichment(store, unsafe_classifier, analyzer):
    record = _pipeline(store, unsafe_classifier, analyzer).submit("Some hateful and violent text")

    assert record.state == ReviewState.PENDING
    assert record.requires_review is True
    assert record.is_approved is False
    assert record.is_content_safe is False
    assert record.severity_level == 6
    assert record.moderation_category == "Hate, Violence"
    assert record.sentiment_score is None
    assert record.sentiment_category is None
    assert record.key_phrases == []
    assert record.language is None
    assert sum(analyzer.calls.values()) == 0
    assert store.get_by_id(record.id) is not None


def test_classifier_outage_fails_open(store, analyzer):
    classifier = FakeClassifier(error=True)
    record = _pipeline(store, classifier, analyzer).submit("Could be anything at all")

    assert classifier.calls == 1
    assert record.is_content_safe is True
    assert record.is_approved is True
    assert record.severity_level == 0
    assert record.sentiment_category == SentimentCategory.POSITIVE


def test_single_enrichment_failure_only_defaults_that_field(store, safe_classifier):
    analyzer = FakeAnalyzer(failing=("sentiment",))
    record = _pipeline(store, safe_classifier, analyzer).submit("The support team was helpful")

    assert record.sentiment_score == 0.5
    assert record.sentiment_category == SentimentCategory.NEUTRAL
    assert record.key_phrases == ["checkout flow", "support"]
    assert record.language == "English"


def test_all_enrichment_failures_store_neutral_markers(store, safe_classifier):
    analyzer = FakeAnalyzer(failing=("sentiment", "key_phrases", "language"))
    record = _pipeline(store, safe_classifier, analyzer).submit("The support team was helpful")

    assert record.is_approved is True
    assert record.sentiment_score == 0.5
    assert record.sentiment_category == SentimentCategory.NEUTRAL
    assert record.key_phrases == []
    assert record.language == "Unknown"
    assert store.get_by_id(record.id) is not None


def test_rate_limited_write_is_retried_once(safe_classifier, analyzer, sleeps):
    store = FlakyStore(throttled=1)
    record = _pipeline(store, safe_classifier, analyzer, sleeps).submit("Retry me once please")

    assert store.writes == 2
    assert sleeps == [1.0]
    assert store.get_by_id(record.id) is not None


def test_second_rate_limit_is_fatal(safe_classifier, analyzer, sleeps):
    store = FlakyStore(throttled=2)
    with pytest.raises(RateLimitedError):
        _pipeline(store, safe_classifier, analyzer, sleeps).submit("Retry me once please")

    assert store.writes == 2
    assert sleeps == [1.0]
    assert store.list_all() == []


@pytest.mark.parametrize("content", ["", "   ", "too short", "x" * 1001])
def test_invalid_content_is_rejected(store, safe_classifier, analyzer, content):
    with pytest.raises(InvalidFeedbackError):
        _pipeline(store, safe_classifier, analyzer).submit(content)

    assert safe_classifier.calls == 0
    assert store.list_all() == []


def test_length_bounds_are_inclusive(store, safe_classifier, analyzer):
    pipeline = _pipeline(store, safe_classifier, analyzer)
    assert pipeline.submit("x" * 10).content == "x" * 10
    assert pipeline.submit("y" * 1000).content == "y" * 1000


def test_content_is_stored_as_submitted(store, safe_classifier, analyzer):
    record = _pipeline(store, safe_classifier, analyzer).submit("   Lovely little shop \n")
    assert record.content == "   Lovely little shop \n"
    assert store.get_by_id(record.id).content == "   Lovely little shop \n"


def test_length_is_measured_without_surrounding_whitespace(store, safe_classifier, analyzer):
    with pytest.raises(InvalidFeedbackError):
        _pipeline(store, safe_classifier, analyzer).submit("   " + "x" * 9 + "   ")
    assert store.list_all() == []


def test_custom_length_bounds(store, safe_classifier, analyzer):
    pipeline = _pipeline(store, safe_classifier, analyzer, min_length=3, max_length=5)
    assert pipeline.submit("abc").content == "abc"
    with pytest.raises(InvalidFeedbackError):
        pipeline.submit("abcdef")


def test_read_helpers(store, safe_classifier, unsafe_classifier, analyzer):
    published = _pipeline(store, safe_classifier, analyzer).submit("A perfectly fine comment")
    held = _pipeline(store, unsafe_classifier, analyzer).submit("A deeply offensive comment")
    pipeline = _pipeline(store, safe_classifier, analyzer)

    assert {r.id for r in pipeline.list_all()} == {published.id, held.id}
    assert [r.id for r in pipeline.list_approved()] == [published.id]
    assert pipeline.get(held.id).requires_review is True
    assert pipeline.get("missing-id") is None
