"""In-memory user repository adapter."""

import copy
from typing import Optional

from app.application.ports.user_repository import UserRepository
from app.domain.entities.user import User


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of user repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[str, User] = {}

    async def get(self, user_id: str) -> Optional[User]:
        """
        Get a user by id.

        Args:
            user_id: User identifier

        Returns:
            Copy of the stored user, or None if not found
        """
        user = self._storage.get(user_id)
        return copy.deepcopy(user) if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by exact email.

        Args:
            email: Email as stored

        Returns:
            Copy of the stored user, or None if not found
        """
        for user in self._storage.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    async def add(self, user: User) -> User:
        """
        Store a new user.

        Args:
            user: User entity

        Returns:
            Copy of the stored user

        Raises:
            ValueError: If the id or email is already taken
        """
        if user.id in self._storage or await self.get_by_email(user.email) is not None:
            raise ValueError(f"User already exists: {user.email}")
        self._storage[user.id] = copy.deepcopy(user)
        return copy.deepcopy(user)
