"""Bearer session authentication for API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Header, HTTPException, Request, status

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

_BEARER_PREFIX = "Bearer "


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Return the id of the user owning the request's bearer session."""
    container: AppContainer = request.app.state.container
    token = _parse_bearer(authorization)
    user_id = container.auth_service.resolve_user(token)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user_id


def _parse_bearer(header: str | None) -> str | None:
    if not header or not header.startswith(_BEARER_PREFIX):
        return None
    return header[len(_BEARER_PREFIX) :].strip() or None
