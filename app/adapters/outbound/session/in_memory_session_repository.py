"""In-memory login session repository adapter."""

from typing import Optional

from app.application.ports.session_repository import SessionRepository
from app.domain.entities.session import Session


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of session repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[str, Session] = {}

    async def get(self, token: str) -> Optional[Session]:
        """
        Get a session by token.

        Args:
            token: Opaque session token

        Returns:
            Session, or None if not found
        """
        return self._storage.get(token)

    async def save(self, session: Session) -> None:
        """
        Save a session.

        Args:
            session: Session to store
        """
        self._storage[session.token] = session

    async def delete(self, token: str) -> None:
        """
        Delete a session.

        Args:
            token: Opaque session token
        """
        self._storage.pop(token, None)
