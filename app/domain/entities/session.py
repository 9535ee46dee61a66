"""Login session entity and the per-request auth capability."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.domain.value_objects.user_role import UserRole


@dataclass
class Session:
    """Server-side login session addressed by an opaque token."""

    token: str
    user_id: str
    expires_at: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def start(cls, token: str, user_id: str, ttl_seconds: int) -> "Session":
        """Create a session expiring ttl_seconds from now."""
        now = datetime.now(timezone.utc)
        return cls(
            token=token,
            user_id=user_id,
            expires_at=now + timedelta(seconds=ttl_seconds),
            created_at=now,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the session is past its expiry."""
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        # SQLite returns naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= now


@dataclass(frozen=True)
class AuthContext:
    """Authenticated caller, resolved once per request and passed to use cases."""

    user_id: str
    role: UserRole
    token: str
