"""Listing submission rules."""

from collections.abc import Iterable
from typing import Optional

from app.domain.value_objects.image_position import REQUIRED_POSITIONS, ImagePosition

REQUIRED_IMAGE_COUNT = len(REQUIRED_POSITIONS)

# Coarse category check; brand and model are included so "Toyota Avanza MPV" passes
VEHICLE_KEYWORDS = ("mobil", "car", "sedan", "suv", "mpv", "hatchback", "truck", "pickup")


def is_vehicle(name: str, brand: str, model: str) -> bool:
    """
    Check whether a listing looks like a car by keyword.

    Args:
        name: Listing title
        brand: Car brand
        model: Car model

    Returns:
        True if any field contains a vehicle keyword (case-insensitive)
    """
    fields = [(value or "").lower() for value in (name, brand, model)]
    return any(keyword in value for keyword in VEHICLE_KEYWORDS for value in fields)


def has_required_image_count(image_count: int) -> bool:
    """Exactly one photo per required position."""
    return image_count == REQUIRED_IMAGE_COUNT


def find_missing_positions(positions: Iterable[Optional[str]]) -> list[ImagePosition]:
    """
    Find required photo positions not covered by the submission.

    Args:
        positions: Raw position values of the submitted images

    Returns:
        Missing positions in canonical order (empty if all are covered)
    """
    supplied = {position for position in positions if position}
    return [position for position in REQUIRED_POSITIONS if position.value not in supplied]
