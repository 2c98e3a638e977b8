"""FastAPI application for the SFC (Smart Feedback Collector) API.

Provides REST API endpoints wrapping the SFC Python package for:
- Feedback submission and browsing of published feedback
- The moderation queue (pending / rejected, approve / reject)
- Dashboard statistics

Run with ``uvicorn web.backend.app.main:create_app --factory``.

Handlers that reach the store or an analysis provider are plain ``def`` and
run in the threadpool; only the meta endpoints are coroutines.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

# Ensure the SFC package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sfc import __version__
from sfc.services import Services, build_services
from web.backend.app.routers import admin, dashboard, feedback


def create_app(services: Optional[Services] = None) -> FastAPI:
    """Build the application.

    Services are constructed here, once, from configuration unless supplied;
    missing configuration stops startup with the list of missing keys.
    """
    if services is None:
        from sfc.logging_config import configure_logging

        services = build_services()
        logging_options = services.settings.logging
        configure_logging(logging_options.level, logging_options.json_output)

    app = FastAPI(
        title="SFC API",
        description=(
            "REST API for the Smart Feedback Collector. "
            "Provides endpoints for feedback submission, moderation review, "
            "and dashboard statistics."
        ),
        version=__version__,
    )
    app.state.services = services

    # -----------------------------------------------------------------------
    # CORS middleware (allow all origins for development)
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(feedback.router)
    app.include_router(admin.router)
    app.include_router(dashboard.router)

    @app.get("/", tags=["meta"])
    async def root():
        """Return basic API information."""
        return {
            "name": "SFC API",
            "version": __version__,
            "description": "Smart Feedback Collector REST API",
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    @app.get("/health", tags=["meta"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
