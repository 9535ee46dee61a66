"""Unit tests for seller contact helpers."""

from urllib.parse import parse_qs, urlparse

import pytest

from app.domain.entities.listing import Car
from app.domain.services.contact_link import (
    build_contact_link,
    build_inquiry_message,
    normalize_phone,
)
from app.domain.value_objects.car_condition import CarCondition
from app.domain.value_objects.money_idr import MoneyIDR


@pytest.fixture
def car() -> Car:
    """Sample listing."""
    return Car(
        user_id="user_1",
        name="Mobil Keluarga Toyota Avanza",
        brand="Toyota",
        model="Avanza",
        year=2019,
        condition=CarCondition.BEKAS,
        price=150_000_000.0,
        address="Jl. Sudirman No. 1",
        city="Jakarta Selatan",
        province="DKI Jakarta",
    )


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("081234567890", "6281234567890"),
        ("0812-3456-7890", "6281234567890"),
        ("+62 812 3456 7890", "6281234567890"),
        ("6281234567890", "6281234567890"),
    ],
)
def test_normalize_phone(raw: str, expected: str) -> None:
    """Local numbers get the country code; non-digits are stripped."""
    assert normalize_phone(raw) == expected


def test_money_idr_format() -> None:
    """Rupiah uses dot thousands separators and no decimals."""
    assert MoneyIDR(150_000_000).format() == "Rp 150.000.000"
    assert MoneyIDR(999).format() == "Rp 999"
    assert MoneyIDR(1_250_500.4).format() == "Rp 1.250.500"


def test_money_idr_rejects_negative() -> None:
    """Negative amounts are invalid."""
    with pytest.raises(ValueError):
        MoneyIDR(-1)


def test_build_inquiry_message(car: Car) -> None:
    """Message lists the car, year, price and location."""
    message = build_inquiry_message(car)

    assert message == (
        "Halo, saya tertarik dengan mobil:\n\n"
        "Mobil Keluarga Toyota Avanza\n"
        "Tahun: 2019\n"
        "Harga: Rp 150.000.000\n"
        "Lokasi: Jakarta Selatan, DKI Jakarta\n\n"
        "Apakah masih tersedia?"
    )


def test_build_contact_link(car: Car) -> None:
    """The URL targets the normalised phone and carries the encoded message."""
    link = build_contact_link(car, "0812-3456-7890")

    parsed = urlparse(link.url)
    assert parsed.scheme == "https"
    assert parsed.netloc == "wa.me"
    assert parsed.path == "/6281234567890"
    assert parse_qs(parsed.query)["text"][0] == link.message
    assert link.phone == "6281234567890"
    assert " " not in link.url


def test_build_contact_link_custom_base_url(car: Car) -> None:
    """Base URL and country code are configurable."""
    link = build_contact_link(car, "0812", base_url="https://api.whatsapp.com/", country_code="1")

    assert link.url.startswith("https://api.whatsapp.com/1812?text=")
