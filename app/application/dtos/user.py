"""User DTOs."""

from typing import Optional

from pydantic import ConfigDict

from app.application.dtos.base import DTO
from app.domain.entities.user import User
from app.domain.services.seller_profile import seller_badge


class RegisterUserRequest(DTO):
    """Registration payload. Presence rules are enforced by the use case."""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    dealer_brand: Optional[str] = None
    name_tag_url: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "budi@dealer.co.id",
                "password": "rahasia123",
                "name": "Budi Santoso",
                "phone": "081234567890",
                "role": "DEALER_OFFICIAL",
                "dealerBrand": "Toyota",
                "nameTagUrl": "https://cdn.example.com/nametag/budi.jpg",
            }
        }
    )


class RegisteredUser(DTO):
    """Created account, as returned by registration."""

    id: str
    email: str
    name: str
    role: str

    @classmethod
    def from_entity(cls, user: User) -> "RegisteredUser":
        """Map a user entity."""
        return cls(id=user.id, email=user.email, name=user.name, role=user.role.value)


class RegisterUserResponse(DTO):
    """Registration response."""

    message: str
    user: RegisteredUser


class OwnerSummary(DTO):
    """Public seller fields shown on listings."""

    id: str
    name: str
    phone: str
    role: str
    dealer_brand: Optional[str] = None
    is_verified: bool
    badge: str

    @classmethod
    def from_entity(cls, user: User) -> "OwnerSummary":
        """Map a user entity."""
        return cls(
            id=user.id,
            name=user.name,
            phone=user.phone,
            role=user.role.value,
            dealer_brand=user.dealer_brand,
            is_verified=user.is_verified,
            badge=seller_badge(user.role, user.is_verified, user.dealer_brand),
        )


class OwnerProfile(OwnerSummary):
    """Seller fields shown on the listing detail page."""

    name_tag_url: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "OwnerProfile":
        """Map a user entity."""
        summary = OwnerSummary.from_entity(user)
        return cls(**summary.model_dump(), name_tag_url=user.name_tag_url)


class CurrentUser(OwnerProfile):
    """Signed-in user's own profile."""

    email: str

    @classmethod
    def from_entity(cls, user: User) -> "CurrentUser":
        """Map a user entity."""
        profile = OwnerProfile.from_entity(user)
        return cls(**profile.model_dump(), email=user.email)
