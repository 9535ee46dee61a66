"""Login session repository adapters."""

from app.adapters.outbound.session.in_memory_session_repository import (
    InMemorySessionRepository,
)
from app.adapters.outbound.session.postgres_session_repository import (
    PostgresSessionRepository,
)

__all__ = [
    "InMemorySessionRepository",
    "PostgresSessionRepository",
]
