"""Supabase repository for auth sessions."""

from dataclasses import dataclass
from datetime import UTC
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import parse_timestamp
from fitness_tracker.domain.models import AuthSession
from fitness_tracker.services.auth import AuthSessionRepository


@dataclass
class SupabaseAuthSessionRepository(AuthSessionRepository):
    """Supabase implementation for bearer sessions."""

    client: Client

    def get_session(self, session_id: UUID) -> AuthSession | None:
        """Return a session by id, if present."""
        response = (
            self.client.table("sessions")
            .select("id, user_id, expires_at")
            .eq("id", str(session_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        expires_at = parse_timestamp(row.get("expires_at"))
        if expires_at is None:
            return None
        # timestamp columns without a zone are stored in UTC
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return AuthSession(
            id=UUID(row["id"]),
            user_id=UUID(row["user_id"]),
            expires_at=expires_at,
        )
