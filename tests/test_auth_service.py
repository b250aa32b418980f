"""Tests for bearer session resolution."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from fitness_tracker.domain.models import AuthSession
from fitness_tracker.services.auth import AuthService
from tests.conftest import InMemoryAuthSessionRepository


def test_resolve_user_returns_session_owner(
    session_repository: InMemoryAuthSessionRepository,
) -> None:
    user_id = uuid4()
    session = session_repository.create_session(user_id, ttl=timedelta(hours=1))
    service = AuthService(session_repository)

    assert service.resolve_user(str(session.id)) == user_id


def test_resolve_user_rejects_expired_session(
    session_repository: InMemoryAuthSessionRepository,
) -> None:
    session = AuthSession(
        id=uuid4(),
        user_id=uuid4(),
        expires_at=datetime.now(tz=UTC) - timedelta(minutes=1),
    )
    session_repository.sessions[session.id] = session
    service = AuthService(session_repository)

    assert service.resolve_user(str(session.id)) is None


def test_resolve_user_rejects_unknown_and_malformed_tokens(
    session_repository: InMemoryAuthSessionRepository,
) -> None:
    service = AuthService(session_repository)

    assert service.resolve_user(None) is None
    assert service.resolve_user("") is None
    assert service.resolve_user("not-a-session") is None
    assert service.resolve_user(str(UUID(int=1))) is None
