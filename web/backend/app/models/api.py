"""Pydantic request/response models for the SFC REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from sfc.dashboard import DashboardSummary
from sfc.feedback.models import FeedbackRecord


# ---------------------------------------------------------------------------
# Feedback models
# ---------------------------------------------------------------------------


class SubmitFeedbackRequest(BaseModel):
    """Request body for submitting new feedback."""

    content: str


class FeedbackResponse(BaseModel):
    """Public representation of a feedback record."""

    id: str
    content: str
    submission_time: datetime
    sentiment_score: Optional[float] = None
    sentiment_category: Optional[str] = None
    key_phrases: list[str] = Field(default_factory=list)
    language: Optional[str] = None
    is_content_safe: bool = True
    severity_level: int = 0
    flagged_categories: list[str] = Field(default_factory=list)
    moderation_category: Optional[str] = None
    requires_review: bool = False
    is_approved: bool = True
    review_notes: str = ""
    state: str = "approved"

    @classmethod
    def from_record(cls, record: FeedbackRecord) -> FeedbackResponse:
        return cls(**record.to_dict(), state=record.state.value)


class SubmitFeedbackResponse(BaseModel):
    """Submission outcome with the message shown to the submitter."""

    feedback: FeedbackResponse
    message: str


# ---------------------------------------------------------------------------
# Admin models
# ---------------------------------------------------------------------------


class ReviewDecisionRequest(BaseModel):
    """Request body for approving or rejecting feedback."""

    notes: str = ""


class PendingCountResponse(BaseModel):
    pending_count: int


# ---------------------------------------------------------------------------
# Dashboard models
# ---------------------------------------------------------------------------


class DashboardResponse(BaseModel):
    """Aggregated dashboard figures."""

    total_count: int = 0
    positive_count: int = 0
    neutral_count: int = 0
    negative_count: int = 0
    pending_count: int = 0
    submissions_by_day: dict[str, int] = Field(default_factory=dict)
    language_distribution: dict[str, int] = Field(default_factory=dict)
    top_key_phrases: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_summary(cls, summary: DashboardSummary, pending_count: int) -> DashboardResponse:
        return cls(
            total_count=summary.total_count,
            positive_count=summary.positive_count,
            neutral_count=summary.neutral_count,
            negative_count=summary.negative_count,
            pending_count=pending_count,
            submissions_by_day=summary.submissions_by_day,
            language_distribution=summary.language_distribution,
            top_key_phrases=summary.top_key_phrases,
        )
