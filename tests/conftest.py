"""Shared pytest fixtures."""

from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.persistence.models import Base
from app.domain.value_objects.image_position import REQUIRED_POSITIONS

ImagesFactory = Callable[[Optional[list[str]]], list[dict]]


@pytest.fixture
def build_images() -> ImagesFactory:
    """Factory for image payloads; defaults to one image per required position."""

    def _build(positions: Optional[list[str]] = None) -> list[dict]:
        if positions is None:
            positions = [position.value for position in REQUIRED_POSITIONS]
        return [
            {
                "url": f"https://cdn.example.com/avanza/{index}-{position.lower()}.jpg",
                "position": position,
            }
            for index, position in enumerate(positions)
        ]

    return _build


@pytest.fixture
def listing_payload(build_images: ImagesFactory) -> dict:
    """Valid listing payload as sent by the upload form (camelCase, string numbers)."""
    return {
        "name": "Mobil Keluarga Toyota Avanza",
        "brand": "Toyota",
        "model": "Avanza",
        "year": "2019",
        "description": "Servis rutin di bengkel resmi",
        "condition": "BEKAS",
        "price": "150000000",
        "address": "Jl. Sudirman No. 1",
        "city": "Jakarta Selatan",
        "province": "DKI Jakarta",
        "mileage": "45000",
        "transmission": "Manual",
        "fuelType": "Bensin",
        "color": "Hitam",
        "taxStatus": "AKTIF",
        "taxYear": "2025",
        "stnkStatus": "Lengkap",
        "images": build_images(),
    }


@pytest.fixture
def sqlite_session_factory():
    """SQLite in-memory session factory with the marketplace schema."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
