"""Unit tests for listing submission rules."""

import pytest

from app.domain.services.listing_validation import (
    REQUIRED_IMAGE_COUNT,
    find_missing_positions,
    has_required_image_count,
    is_vehicle,
)
from app.domain.value_objects.image_position import ImagePosition


@pytest.mark.parametrize(
    "name,brand,model",
    [
        ("Mobil Keluarga", "Toyota", "Avanza"),
        ("Honda Jazz", "Honda", "Jazz Hatchback"),
        ("Fortuner 2020", "Toyota", "Fortuner SUV"),
        ("Dijual cepat", "Mitsubishi", "L300 Pickup"),
        ("BMW 320i SEDAN", "BMW", "3 Series"),
    ],
)
def test_is_vehicle_accepts_keyword_in_any_field(name: str, brand: str, model: str) -> None:
    """A keyword in name, brand or model marks the listing as a vehicle."""
    assert is_vehicle(name, brand, model) is True


def test_is_vehicle_rejects_without_keyword() -> None:
    """Listings with no keyword anywhere are rejected."""
    assert is_vehicle("Kulkas 2 pintu", "Sharp", "SJ-195") is False


def test_is_vehicle_brand_alone_does_not_count() -> None:
    """A plain brand and model without a keyword is not recognised (known gap)."""
    assert is_vehicle("Honda Civic", "Honda", "Civic") is False


def test_is_vehicle_handles_missing_fields() -> None:
    """None values are treated as empty text."""
    assert is_vehicle(None, None, "MPV") is True
    assert is_vehicle(None, None, None) is False


def test_required_image_count() -> None:
    """Exactly six photos are required."""
    assert REQUIRED_IMAGE_COUNT == 6
    assert has_required_image_count(6) is True
    assert has_required_image_count(5) is False
    assert has_required_image_count(7) is False
    assert has_required_image_count(0) is False


def test_find_missing_positions_none_missing() -> None:
    """Full coverage yields no missing positions."""
    positions = ["DASHBOARD", "DALAM", "BELAKANG", "SAMPING_KANAN", "SAMPING_KIRI", "DEPAN"]
    assert find_missing_positions(positions) == []


def test_find_missing_positions_reports_canonical_order() -> None:
    """Missing positions come back in canonical order regardless of input order."""
    positions = ["DALAM", "DEPAN", "DEPAN", "SAMPING_KANAN", "DEPAN", "DALAM"]

    missing = find_missing_positions(positions)

    assert missing == [
        ImagePosition.SAMPING_KIRI,
        ImagePosition.BELAKANG,
        ImagePosition.DASHBOARD,
    ]


def test_find_missing_positions_ignores_unknown_values() -> None:
    """Unknown or empty positions do not cover anything."""
    missing = find_missing_positions(["ATAS", None, "", "depan"])

    assert missing == list(ImagePosition)
