"""Login session repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.session import Session


class SessionRepository(ABC):
    """Port interface for login sessions."""

    @abstractmethod
    async def get(self, token: str) -> Optional[Session]:
        """
        Get a session by token.

        Args:
            token: Opaque session token

        Returns:
            Session, or None if not found
        """
        pass

    @abstractmethod
    async def save(self, session: Session) -> None:
        """
        Save a session.

        Args:
            session: Session to store
        """
        pass

    @abstractmethod
    async def delete(self, token: str) -> None:
        """
        Delete a session (no-op if absent).

        Args:
            token: Opaque session token
        """
        pass
