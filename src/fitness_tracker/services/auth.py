"""Bearer session resolution."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.models import AuthSession


class AuthSessionRepository(Protocol):
    """Persistence interface for auth sessions."""

    def get_session(self, session_id: UUID) -> AuthSession | None:
        """Return a session by id, if present."""


@dataclass
class AuthService:
    """Resolves bearer tokens to the user that owns them."""

    repository: AuthSessionRepository

    def resolve_user(self, token: str | None) -> UUID | None:
        """Return the user id for a live session token, else None."""
        if not token:
            return None
        try:
            session_id = UUID(token)
        except ValueError:
            return None
        session = self.repository.get_session(session_id)
        if session is None or session.expires_at <= datetime.now(tz=UTC):
            return None
        return session.user_id
