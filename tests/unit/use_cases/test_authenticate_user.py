"""Unit tests for AuthenticateUser use case."""

from datetime import datetime, timedelta, timezone

import pytest

from app.adapters.outbound.session import InMemorySessionRepository
from app.adapters.outbound.user import InMemoryUserRepository
from app.application.errors import AuthenticationError, InputValidationError
from app.application.use_cases.authenticate_user import AuthenticateUser
from app.domain.entities.session import Session
from app.domain.entities.user import User
from app.domain.value_objects.user_role import UserRole


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """User repository."""
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    """Session repository."""
    return InMemorySessionRepository()


@pytest.fixture
def use_case(user_repository, session_repository) -> AuthenticateUser:
    """AuthenticateUser with a plain comparison verifier and fixed tokens."""
    tokens = iter(["token-1", "token-2", "token-3"])
    return AuthenticateUser(
        user_repository,
        session_repository,
        password_verifier=lambda password_hash, password: password_hash == f"hashed::{password}",
        session_ttl_seconds=3600,
        token_factory=lambda: next(tokens),
    )


@pytest.fixture
async def user(user_repository: InMemoryUserRepository) -> User:
    """Registered consumer."""
    return await user_repository.add(
        User.register(
            email="budi@example.com",
            password_hash="hashed::rahasia123",
            name="Budi",
            phone="081234567890",
            role=UserRole.CONSUMER,
        )
    )


@pytest.mark.asyncio
async def test_login_issues_session(
    use_case: AuthenticateUser, user: User, session_repository
) -> None:
    """Correct credentials create a stored session."""
    session, logged_in = await use_case.login("budi@example.com", "rahasia123")

    assert session.token == "token-1"
    assert session.user_id == user.id
    assert logged_in.id == user.id
    assert await session_repository.get("token-1") is not None


@pytest.mark.asyncio
async def test_login_wrong_password(use_case: AuthenticateUser, user: User) -> None:
    """Wrong password is an authentication error."""
    with pytest.raises(AuthenticationError):
        await use_case.login("budi@example.com", "salah")


@pytest.mark.asyncio
async def test_login_unknown_email(use_case: AuthenticateUser) -> None:
    """Unknown email is an authentication error."""
    with pytest.raises(AuthenticationError):
        await use_case.login("nobody@example.com", "rahasia123")


@pytest.mark.asyncio
async def test_login_missing_fields(use_case: AuthenticateUser) -> None:
    """Email and password are required."""
    with pytest.raises(InputValidationError):
        await use_case.login("budi@example.com", None)


@pytest.mark.asyncio
async def test_resolve_valid_token(use_case: AuthenticateUser, user: User) -> None:
    """A live session resolves to an AuthContext."""
    session, _ = await use_case.login("budi@example.com", "rahasia123")

    auth = await use_case.resolve(session.token)

    assert auth is not None
    assert auth.user_id == user.id
    assert auth.role is UserRole.CONSUMER
    assert auth.token == session.token


@pytest.mark.asyncio
async def test_resolve_missing_or_unknown_token(use_case: AuthenticateUser) -> None:
    """Absent or unknown tokens resolve to None."""
    assert await use_case.resolve(None) is None
    assert await use_case.resolve("") is None
    assert await use_case.resolve("does-not-exist") is None


@pytest.mark.asyncio
async def test_resolve_expired_token_is_deleted(
    use_case: AuthenticateUser, user: User, session_repository
) -> None:
    """Expired sessions do not resolve and are removed."""
    expired = Session(
        token="old",
        user_id=user.id,
        expires_at=datetime.now(timezone.utc) - timedelta(seconds=1),
    )
    await session_repository.save(expired)

    assert await use_case.resolve("old") is None
    assert await session_repository.get("old") is None


@pytest.mark.asyncio
async def test_logout_ends_session(use_case: AuthenticateUser, user: User) -> None:
    """After logout the token no longer resolves."""
    session, _ = await use_case.login("budi@example.com", "rahasia123")
    auth = await use_case.resolve(session.token)

    await use_case.logout(auth)

    assert await use_case.resolve(session.token) is None


@pytest.mark.asyncio
async def test_current_user(use_case: AuthenticateUser, user: User) -> None:
    """The capability loads the caller's account."""
    session, _ = await use_case.login("budi@example.com", "rahasia123")
    auth = await use_case.resolve(session.token)

    current = await use_case.current_user(auth)

    assert current.email == "budi@example.com"
