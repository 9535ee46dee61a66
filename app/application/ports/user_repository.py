"""User repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.user import User


class UserRepository(ABC):
    """Port interface for user repository."""

    @abstractmethod
    async def get(self, user_id: str) -> Optional[User]:
        """
        Get a user by id.

        Args:
            user_id: User identifier

        Returns:
            User entity, or None if not found
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by exact email.

        Args:
            email: Email as stored (case-sensitive)

        Returns:
            User entity, or None if not found
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """
        Persist a new user.

        Args:
            user: User entity to insert

        Returns:
            The stored user
        """
        pass
