"""Feedback router -- public submission and browsing of published feedback."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from sfc.errors import InvalidFeedbackError
from sfc.services import Services
from web.backend.app.dependencies import get_services
from web.backend.app.models.api import (
    FeedbackResponse,
    SubmitFeedbackRequest,
    SubmitFeedbackResponse,
)

router = APIRouter(prefix="/api/feedback", tags=["feedback"])

_ACCEPTED_MSG = "Your feedback has been submitted and analyzed. Thank you!"
_HELD_MSG = (
    "Your feedback contains content that requires review. "
    "It has been submitted for moderation."
)


@router.post(
    "",
    response_model=SubmitFeedbackResponse,
    summary="Submit new feedback",
    status_code=status.HTTP_201_CREATED,
)
def submit_feedback(body: SubmitFeedbackRequest, services: Services = Depends(get_services)):
    """Screen, enrich and store a new piece of feedback."""
    try:
        record = services.pipeline.submit(body.content)
    except InvalidFeedbackError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )
    return SubmitFeedbackResponse(
        feedback=FeedbackResponse.from_record(record),
        message=_ACCEPTED_MSG if record.is_content_safe else _HELD_MSG,
    )


@router.get(
    "",
    response_model=list[FeedbackResponse],
    summary="List published feedback",
)
def list_feedback(services: Services = Depends(get_services)):
    """Return approved feedback, newest first."""
    return [FeedbackResponse.from_record(r) for r in services.pipeline.list_approved()]


@router.get(
    "/{feedback_id}",
    response_model=FeedbackResponse,
    summary="Get a single feedback record",
)
def get_feedback(feedback_id: str, services: Services = Depends(get_services)):
    """Return one feedback record by ID."""
    record = services.pipeline.get(feedback_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feedback '{feedback_id}' not found",
        )
    return FeedbackResponse.from_record(record)
