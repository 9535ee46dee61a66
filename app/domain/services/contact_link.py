"""WhatsApp contact handoff for a listing."""

import re
from dataclasses import dataclass
from urllib.parse import quote

from app.domain.entities.listing import Car
from app.domain.value_objects.money_idr import MoneyIDR


@dataclass(frozen=True)
class ContactLink:
    """Deep link that opens a chat with the seller."""

    url: str
    phone: str
    message: str


def normalize_phone(phone: str, country_code: str = "62") -> str:
    """
    Convert a local phone number to international digits.

    Args:
        phone: Phone as entered by the seller (e.g. "0812-3456-7890")
        country_code: Country calling code replacing a leading 0

    Returns:
        Digits only, e.g. "6281234567890"
    """
    phone = phone.strip()
    if phone.startswith("0"):
        phone = country_code + phone[1:]
    return re.sub(r"\D", "", phone)


def build_inquiry_message(car: Car) -> str:
    """Prefilled buyer message for a listing."""
    return (
        "Halo, saya tertarik dengan mobil:\n\n"
        f"{car.name}\n"
        f"Tahun: {car.year}\n"
        f"Harga: {MoneyIDR(car.price).format()}\n"
        f"Lokasi: {car.city}, {car.province}\n\n"
        "Apakah masih tersedia?"
    )


def build_contact_link(
    car: Car,
    seller_phone: str,
    base_url: str = "https://wa.me",
    country_code: str = "62",
) -> ContactLink:
    """
    Build the WhatsApp link for contacting a listing's seller.

    Args:
        car: Listing being inquired about
        seller_phone: Seller phone number
        base_url: WhatsApp click-to-chat base URL
        country_code: Country calling code for local numbers

    Returns:
        ContactLink with URL-encoded message
    """
    phone = normalize_phone(seller_phone, country_code)
    message = build_inquiry_message(car)
    url = f"{base_url.rstrip('/')}/{phone}?text={quote(message, safe='')}"
    return ContactLink(url=url, phone=phone, message=message)
