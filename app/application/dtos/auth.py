"""Authentication DTOs."""

from datetime import datetime
from typing import Optional

from app.application.dtos.base import DTO
from app.application.dtos.user import CurrentUser


class LoginRequest(DTO):
    """Login payload."""

    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(DTO):
    """Issued session token."""

    token: str
    expires_at: datetime
    user: CurrentUser


class CurrentUserResponse(DTO):
    """Profile of the signed-in user."""

    user: CurrentUser


class MessageResponse(DTO):
    """Plain confirmation message."""

    message: str
