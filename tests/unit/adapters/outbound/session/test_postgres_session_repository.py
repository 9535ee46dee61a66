"""Unit tests for Postgres session repository using SQLite in-memory."""

from datetime import datetime, timedelta, timezone

import pytest

from app.adapters.outbound.session.postgres_session_repository import PostgresSessionRepository
from app.adapters.outbound.user.postgres_user_repository import PostgresUserRepository
from app.domain.entities.session import Session
from app.domain.entities.user import User
from app.domain.value_objects.user_role import UserRole


@pytest.fixture
def repositories(sqlite_session_factory, monkeypatch):
    """Session and user repositories sharing one SQLite database."""

    def get_test_db_session():
        return sqlite_session_factory()

    for module in ("session.postgres_session_repository", "user.postgres_user_repository"):
        monkeypatch.setattr(
            f"app.adapters.outbound.{module}.get_db_session",
            get_test_db_session,
        )

    return PostgresSessionRepository(), PostgresUserRepository()


@pytest.fixture
async def user(repositories) -> User:
    """Stored consumer."""
    _, user_repository = repositories
    return await user_repository.add(
        User.register(
            email="budi@example.com",
            password_hash="hashed",
            name="Budi",
            phone="081234567890",
            role=UserRole.CONSUMER,
        )
    )


@pytest.mark.asyncio
async def test_save_and_get(repositories, user):
    """Saved sessions are found by token with UTC expiry."""
    repository, _ = repositories
    session = Session.start(token="token-1", user_id=user.id, ttl_seconds=3600)

    await repository.save(session)
    stored = await repository.get("token-1")

    assert stored is not None
    assert stored.user_id == user.id
    assert stored.expires_at.tzinfo is not None
    assert abs(stored.expires_at - session.expires_at) < timedelta(seconds=1)
    assert stored.is_expired() is False


@pytest.mark.asyncio
async def test_save_upserts_by_token(repositories, user):
    """Saving an existing token updates its expiry."""
    repository, _ = repositories
    await repository.save(Session.start(token="token-1", user_id=user.id, ttl_seconds=3600))
    expired_at = datetime.now(timezone.utc) - timedelta(minutes=1)

    await repository.save(Session(token="token-1", user_id=user.id, expires_at=expired_at))
    stored = await repository.get("token-1")

    assert stored.is_expired() is True


@pytest.mark.asyncio
async def test_delete(repositories, user):
    """Deleted sessions are gone; deleting twice is harmless."""
    repository, _ = repositories
    await repository.save(Session.start(token="token-1", user_id=user.id, ttl_seconds=3600))

    await repository.delete("token-1")
    await repository.delete("token-1")

    assert await repository.get("token-1") is None
