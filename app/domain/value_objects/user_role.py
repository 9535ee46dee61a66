"""User role value object."""

from enum import Enum


class UserRole(str, Enum):
    """Marketplace account role."""

    CONSUMER = "CONSUMER"
    DEALER_SEMI = "DEALER_SEMI"
    DEALER_OFFICIAL = "DEALER_OFFICIAL"

    @property
    def is_dealer(self) -> bool:
        """Whether the role is one of the dealer variants."""
        return self in (UserRole.DEALER_SEMI, UserRole.DEALER_OFFICIAL)

    @property
    def requires_verification(self) -> bool:
        """Official dealers start unverified until reviewed manually."""
        return self is UserRole.DEALER_OFFICIAL

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        """
        Parse a role string.

        Args:
            value: Raw role string

        Returns:
            UserRole member

        Raises:
            ValueError: If value is not a known role
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown user role: {value!r}") from None
