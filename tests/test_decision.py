"""Tests for safety results and the moderation decision."""

from sfc.feedback.models import FeedbackRecord, ReviewState
from sfc.moderation import ModerationResult, RecommendedAction, decide


def test_from_scores_flags_at_threshold():
    result = ModerationResult.from_scores({"Hate": 4, "Violence": 3, "Sexual": 0}, threshold=4)
    assert result.is_content_safe is False
    assert result.flagged_categories == ["Hate"]
    assert result.max_severity_level == 4
    assert result.recommended_action == RecommendedAction.REVIEW


def test_from_scores_below_threshold_is_safe():
    result = ModerationResult.from_scores({"Hate": 2, "Violence": 0}, threshold=4)
    assert result.is_content_safe is True
    assert result.flagged_categories == []
    assert result.max_severity_level == 2
    assert result.recommended_action == RecommendedAction.ACCEPT


def test_from_scores_empty():
    result = ModerationResult.from_scores({}, threshold=4)
    assert result.is_content_safe is True
    assert result.max_severity_level == 0


def test_unscreened_is_safe_accept():
    result = ModerationResult.unscreened()
    assert result.is_content_safe is True
    assert result.recommended_action == RecommendedAction.ACCEPT
    assert result.flagged_categories == []


def test_decide_safe_publishes():
    decision = decide(ModerationResult.from_scores({"Hate": 2}, threshold=4))
    assert decision.requires_review is False
    assert decision.is_approved is True
    assert decision.severity_level == 2
    assert decision.moderation_category is None


def test_decide_unsafe_holds_for_review():
    result = ModerationResult.from_scores({"Hate": 6, "Violence": 4, "Sexual": 0}, threshold=4)
    decision = decide(result)
    assert decision.is_content_safe is False
    assert decision.requires_review is True
    assert decision.is_approved is False
    assert decision.severity_level == 6
    assert decision.flagged_categories == ["Hate", "Violence"]
    assert decision.moderation_category == "Hate, Violence"


def test_decision_apply_to_record():
    record = FeedbackRecord(content="something nasty")
    decide(ModerationResult.from_scores({"Violence": 6}, threshold=4)).apply_to(record)
    assert record.state == ReviewState.PENDING
    assert record.moderation_category == "Violence"
    assert record.severity_level == 6
