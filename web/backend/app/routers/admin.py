"""Admin router -- the moderation queue and approve/reject decisions."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from sfc.services import Services
from web.backend.app.dependencies import get_services
from web.backend.app.models.api import (
    FeedbackResponse,
    PendingCountResponse,
    ReviewDecisionRequest,
)

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _not_found(feedback_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Feedback '{feedback_id}' not found",
    )


@router.get(
    "/pending",
    response_model=list[FeedbackResponse],
    summary="List feedback awaiting review",
)
def list_pending(services: Services = Depends(get_services)):
    """Return feedback flagged for manual moderation."""
    return [FeedbackResponse.from_record(r) for r in services.review.pending_review()]


@router.get(
    "/pending/count",
    response_model=PendingCountResponse,
    summary="Count feedback awaiting review",
)
def pending_count(services: Services = Depends(get_services)):
    return PendingCountResponse(pending_count=services.review.pending_count())


@router.get(
    "/rejected",
    response_model=list[FeedbackResponse],
    summary="List rejected feedback",
)
def list_rejected(services: Services = Depends(get_services)):
    return [FeedbackResponse.from_record(r) for r in services.review.rejected()]


@router.post(
    "/feedback/{feedback_id}/approve",
    response_model=FeedbackResponse,
    summary="Approve feedback",
)
def approve_feedback(
    feedback_id: str,
    body: Optional[ReviewDecisionRequest] = None,
    services: Services = Depends(get_services),
):
    """Approve a pending feedback record, backfilling its analysis if needed."""
    notes = body.notes if body else ""
    record = services.review.approve(feedback_id, notes)
    if record is None:
        raise _not_found(feedback_id)
    return FeedbackResponse.from_record(record)


@router.post(
    "/feedback/{feedback_id}/reject",
    response_model=FeedbackResponse,
    summary="Reject feedback",
)
def reject_feedback(
    feedback_id: str,
    body: Optional[ReviewDecisionRequest] = None,
    services: Services = Depends(get_services),
):
    """Reject a pending feedback record."""
    notes = body.notes if body else ""
    record = services.review.reject(feedback_id, notes)
    if record is None:
        raise _not_found(feedback_id)
    return FeedbackResponse.from_record(record)
