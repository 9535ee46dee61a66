"""User repository adapters."""

from app.adapters.outbound.user.in_memory_user_repository import InMemoryUserRepository
from app.adapters.outbound.user.postgres_user_repository import PostgresUserRepository

__all__ = [
    "InMemoryUserRepository",
    "PostgresUserRepository",
]
