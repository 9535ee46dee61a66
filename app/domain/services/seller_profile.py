"""Seller display rules."""

from typing import Optional

from app.domain.value_objects.user_role import UserRole

BADGE_OFFICIAL_DEALER = "Dealer Resmi"
BADGE_SEMI_DEALER = "Dealer / Showroom"
BADGE_INDIVIDUAL = "Penjual Perorangan"


def seller_badge(role: UserRole, is_verified: bool, dealer_brand: Optional[str] = None) -> str:
    """
    Badge label shown next to a seller.

    Unverified official dealers are shown as individual sellers.

    Args:
        role: Seller role
        is_verified: Verification flag
        dealer_brand: Brand of an official dealer

    Returns:
        Badge label
    """
    if role is UserRole.DEALER_OFFICIAL and is_verified:
        if dealer_brand:
            return f"{BADGE_OFFICIAL_DEALER} {dealer_brand}"
        return BADGE_OFFICIAL_DEALER
    if role is UserRole.DEALER_SEMI:
        return BADGE_SEMI_DEALER
    return BADGE_INDIVIDUAL
