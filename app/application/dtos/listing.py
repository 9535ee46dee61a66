"""Car listing DTOs."""

from datetime import datetime
from typing import Optional, Union

from pydantic import ConfigDict

from app.application.dtos.base import DTO
from app.application.dtos.user import OwnerProfile, OwnerSummary
from app.domain.entities.listing import Car, CarImage

# Form fields may arrive as strings; the use case coerces them. bool comes first so
# JSON true/false stay booleans and are rejected instead of becoming 1/0.
NumericInput = Union[bool, int, float, str, None]


class ListingImageInput(DTO):
    """Photo reference submitted with a listing."""

    url: Optional[str] = None
    position: Optional[str] = None


class CreateListingRequest(DTO):
    """New listing payload. Presence and format rules are enforced by the use case."""

    name: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    year: NumericInput = None
    description: Optional[str] = None
    condition: Optional[str] = None
    price: NumericInput = None
    address: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    mileage: NumericInput = None
    transmission: Optional[str] = None
    fuel_type: Optional[str] = None
    color: Optional[str] = None
    tax_status: Optional[str] = None
    tax_year: NumericInput = None
    stnk_status: Optional[str] = None
    images: Optional[list[ListingImageInput]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Mobil Keluarga Toyota Avanza",
                "brand": "Toyota",
                "model": "Avanza MPV",
                "year": "2019",
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
                "images": [
                    {"url": "https://cdn.example.com/avanza/depan.jpg", "position": "DEPAN"},
                ],
            }
        }
    )


class CarImageResponse(DTO):
    """Listing photo."""

    id: str
    position: str
    url: str

    @classmethod
    def from_entity(cls, image: CarImage) -> "CarImageResponse":
        """Map an image entity."""
        return cls(id=image.id, position=image.position.value, url=image.url)


def _car_fields(car: Car) -> dict:
    return {
        "id": car.id,
        "user_id": car.user_id,
        "name": car.name,
        "brand": car.brand,
        "model": car.model,
        "year": car.year,
        "description": car.description,
        "condition": car.condition.value,
        "price": car.price,
        "address": car.address,
        "city": car.city,
        "province": car.province,
        "mileage": car.mileage,
        "transmission": car.transmission,
        "fuel_type": car.fuel_type,
        "color": car.color,
        "tax_status": car.tax_status,
        "tax_year": car.tax_year,
        "stnk_status": car.stnk_status,
        "views": car.views,
        "is_active": car.is_active,
        "created_at": car.created_at,
        "updated_at": car.updated_at,
    }


class CarResponse(DTO):
    """Listing as shown in search results and after creation."""

    id: str
    user_id: str
    name: str
    brand: str
    model: str
    year: int
    description: Optional[str] = None
    condition: str
    price: float
    address: str
    city: str
    province: str
    mileage: Optional[int] = None
    transmission: Optional[str] = None
    fuel_type: Optional[str] = None
    color: Optional[str] = None
    tax_status: Optional[str] = None
    tax_year: Optional[int] = None
    stnk_status: Optional[str] = None
    views: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
    images: list[CarImageResponse]
    user: Optional[OwnerSummary] = None

    @classmethod
    def from_entity(cls, car: Car) -> "CarResponse":
        """Map a car entity with images in stored order."""
        return cls(
            **_car_fields(car),
            images=[CarImageResponse.from_entity(image) for image in car.images],
            user=OwnerSummary.from_entity(car.owner) if car.owner else None,
        )


class CarDetailResponse(CarResponse):
    """Listing detail: canonical image order and the extended seller profile."""

    user: Optional[OwnerProfile] = None

    @classmethod
    def from_entity(cls, car: Car) -> "CarDetailResponse":
        """Map a car entity with images in canonical order."""
        return cls(
            **_car_fields(car),
            images=[
                CarImageResponse.from_entity(image) for image in car.images_in_canonical_order()
            ],
            user=OwnerProfile.from_entity(car.owner) if car.owner else None,
        )


class CreateListingResponse(DTO):
    """Listing creation response."""

    message: str
    car: CarResponse


class ListingListResponse(DTO):
    """Search results, newest first."""

    cars: list[CarResponse]


class ListingDetailResponse(DTO):
    """Single listing."""

    car: CarDetailResponse


class ContactLinkResponse(DTO):
    """WhatsApp handoff for a listing."""

    url: str
    phone: str
    message: str
