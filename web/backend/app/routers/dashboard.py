"""Dashboard router -- aggregated feedback statistics."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from sfc.dashboard import build_dashboard
from sfc.services import Services
from web.backend.app.dependencies import get_services
from web.backend.app.models.api import DashboardResponse

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Feedback statistics",
)
def get_dashboard(services: Services = Depends(get_services)):
    """Return sentiment counts, daily volume, languages and top key phrases."""
    summary = build_dashboard(services.all_feedback())
    return DashboardResponse.from_summary(summary, services.review.pending_count())
