"""Application errors mapped to HTTP responses by the inbound adapter."""


class MarketplaceError(Exception):
    """Base class for errors with a user-facing message."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        """
        Initialize error.

        Args:
            message: User-facing message, safe to return to the client
        """
        super().__init__(message)
        self.message = message


class InputValidationError(MarketplaceError):
    """Request payload failed validation."""

    status_code = 400


class AuthenticationError(MarketplaceError):
    """Missing, invalid or expired session, or wrong credentials."""

    status_code = 401


class NotFoundError(MarketplaceError):
    """Requested resource does not exist."""

    status_code = 404


class InternalError(MarketplaceError):
    """Unexpected failure, already logged; only a generic message reaches the client."""

    status_code = 500
