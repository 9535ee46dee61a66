"""Session login, logout and per-request resolution."""

import secrets
from typing import Callable, Optional

from app.application.errors import AuthenticationError, InputValidationError
from app.application.ports.session_repository import SessionRepository
from app.application.ports.user_repository import UserRepository
from app.application.use_cases.user_messages_id import UserMessagesID
from app.domain.entities.session import AuthContext, Session
from app.domain.entities.user import User


class AuthenticateUser:
    """Use case for issuing and resolving session tokens."""

    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        password_verifier: Callable[[str, str], bool],
        session_ttl_seconds: int,
        token_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        """
        Initialize authenticate user use case.

        Args:
            user_repository: Repository for users
            session_repository: Repository for login sessions
            password_verifier: Function (password_hash, password) -> bool
            session_ttl_seconds: Lifetime of issued sessions
            token_factory: Optional token generator (defaults to secrets.token_urlsafe)
        """
        self._user_repository = user_repository
        self._session_repository = session_repository
        self._password_verifier = password_verifier
        self._session_ttl_seconds = session_ttl_seconds
        self._token_factory = token_factory or (lambda: secrets.token_urlsafe(32))

    async def login(self, email: Optional[str], password: Optional[str]) -> tuple[Session, User]:
        """
        Verify credentials and start a session.

        Args:
            email: Login email
            password: Plaintext password

        Returns:
            Tuple of (new session, authenticated user)

        Raises:
            InputValidationError: If email or password is missing
            AuthenticationError: If the credentials do not match
        """
        if not email or not password:
            raise InputValidationError(UserMessagesID.LOGIN_MISSING_FIELDS)

        user = await self._user_repository.get_by_email(email)
        if user is None or not self._password_verifier(user.password_hash, password):
            raise AuthenticationError(UserMessagesID.LOGIN_INVALID_CREDENTIALS)

        session = Session.start(self._token_factory(), user.id, self._session_ttl_seconds)
        await self._session_repository.save(session)
        return session, user

    async def resolve(self, token: Optional[str]) -> Optional[AuthContext]:
        """
        Resolve a session token into an auth capability.

        Expired sessions are deleted.

        Args:
            token: Opaque session token, if the request carried one

        Returns:
            AuthContext, or None if the token is absent, unknown or expired
        """
        if not token:
            return None

        session = await self._session_repository.get(token)
        if session is None:
            return None
        if session.is_expired():
            await self._session_repository.delete(token)
            return None

        user = await self._user_repository.get(session.user_id)
        if user is None:
            return None

        return AuthContext(user_id=user.id, role=user.role, token=token)

    async def logout(self, auth: AuthContext) -> None:
        """End the caller's session."""
        await self._session_repository.delete(auth.token)

    async def current_user(self, auth: AuthContext) -> User:
        """
        Load the caller's account.

        Raises:
            AuthenticationError: If the account no longer exists
        """
        user = await self._user_repository.get(auth.user_id)
        if user is None:
            raise AuthenticationError(UserMessagesID.UNAUTHORIZED)
        return user
