"""Shared request dependencies and error helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status

if TYPE_CHECKING:
    from culinary_companion.containers import AppContainer

_logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


async def require_session(request: Request) -> None:
    """Ensure a local account is signed in."""
    container = get_container(request)
    if not container.account_service.is_signed_in():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Please sign in first."
        )


def ai_failure(
    container: AppContainer, exc: Exception, fallback: str
) -> HTTPException:
    """Log a failed AI call and build the user-facing error.

    Exception details are only shown when running locally.
    """
    _logger.exception("AI request failed: %s", fallback)
    detail = fallback
    if container.settings.environment == "local":
        debug = f"{type(exc).__name__}: {exc}".strip()
        if debug:
            detail = f"{fallback} (debug: {debug})"
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
