"""Car listing entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from app.domain.entities.user import User
from app.domain.value_objects.car_condition import CarCondition
from app.domain.value_objects.image_position import ImagePosition


@dataclass
class CarImage:
    """Photo attached to a car at a fixed position."""

    position: ImagePosition
    url: str
    id: str = field(default_factory=lambda: str(uuid4()))
    car_id: Optional[str] = None


@dataclass
class Car:
    """Car listing. Images and owner are loaded explicitly by repositories."""

    user_id: str
    name: str
    brand: str
    model: str
    year: int
    condition: CarCondition
    price: float
    address: str
    city: str
    province: str
    description: Optional[str] = None
    mileage: Optional[int] = None
    transmission: Optional[str] = None
    fuel_type: Optional[str] = None
    color: Optional[str] = None
    tax_status: Optional[str] = None
    tax_year: Optional[int] = None
    stnk_status: Optional[str] = None
    views: int = 0
    is_active: bool = True
    images: list[CarImage] = field(default_factory=list)
    owner: Optional[User] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def images_in_canonical_order(self) -> list[CarImage]:
        """Images sorted DEPAN, SAMPING_KIRI, ..., DASHBOARD."""
        return sorted(self.images, key=lambda image: image.position.sort_index)
