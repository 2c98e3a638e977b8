"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from sfc.services import Services


def get_services(request: Request) -> Services:
    """Return the services built when the application was created."""
    return request.app.state.services
