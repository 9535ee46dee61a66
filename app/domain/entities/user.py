"""User entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from app.domain.value_objects.user_role import UserRole


@dataclass
class User:
    """Marketplace account."""

    email: str
    password_hash: str
    name: str
    phone: str
    role: UserRole
    dealer_brand: Optional[str] = None  # Only for DEALER_OFFICIAL
    name_tag_url: Optional[str] = None  # Only for dealer roles
    is_verified: bool = True
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def register(
        cls,
        email: str,
        password_hash: str,
        name: str,
        phone: str,
        role: UserRole,
        dealer_brand: Optional[str] = None,
        name_tag_url: Optional[str] = None,
    ) -> "User":
        """
        Build a new user, dropping dealer fields the role does not carry.

        Args:
            email: Login email
            password_hash: Already-hashed password
            name: Display name
            phone: Phone number
            role: Account role
            dealer_brand: Brand represented by an official dealer
            name_tag_url: Dealer name tag photo reference

        Returns:
            New User with is_verified derived from the role
        """
        return cls(
            email=email,
            password_hash=password_hash,
            name=name,
            phone=phone,
            role=role,
            dealer_brand=dealer_brand if role is UserRole.DEALER_OFFICIAL else None,
            name_tag_url=name_tag_url if role.is_dealer else None,
            is_verified=not role.requires_verification,
        )
