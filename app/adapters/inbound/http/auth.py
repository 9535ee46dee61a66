"""Per-request session resolution."""

from typing import Optional
from uuid import uuid4

from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.errors import InternalError
from app.application.use_cases.user_messages_id import UserMessagesID
from app.domain.entities.session import AuthContext
from app.infrastructure.logging.logger import logger
from app.infrastructure.wiring.container import Container, get_container

SESSION_COOKIE_NAME = "session_token"

bearer_scheme = HTTPBearer(auto_error=False)


async def get_auth_context(
    session_token: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    container: Container = Depends(get_container),
) -> Optional[AuthContext]:
    """
    Resolve the caller's session once per request.

    The Authorization bearer token takes precedence over the session cookie.

    Returns:
        AuthContext, or None for anonymous callers

    Raises:
        InternalError: If the session store fails; rendered as a generic 500
    """
    token = credentials.credentials if credentials else session_token
    try:
        return await container.authenticate_user.resolve(token)
    except Exception:
        request_id = str(uuid4())
        logger.exception(f"Unexpected error | request_id={request_id!r} | component='session'")
        raise InternalError(UserMessagesID.SESSION_LOOKUP_FAILED) from None
