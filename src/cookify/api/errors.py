"""Helpers for turning failures into user-facing HTTP errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status

if TYPE_CHECKING:
    from cookify.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def format_error(container: AppContainer, exc: Exception, fallback: str) -> str:
    """Return a user-facing error message with local debug info."""
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback


def upstream_error(
    container: AppContainer, exc: Exception, fallback: str
) -> HTTPException:
    """Build a 502 error for a failed call to an external service."""
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=format_error(container, exc, fallback),
    )
