"""Create listing use case."""

import math
from typing import Optional

from app.application.dtos.listing import CreateListingRequest, NumericInput
from app.application.errors import AuthenticationError, InputValidationError
from app.application.ports.car_repository import CarRepository
from app.application.use_cases.user_messages_id import UserMessagesID
from app.domain.entities.listing import Car, CarImage
from app.domain.entities.session import AuthContext
from app.domain.services.listing_validation import (
    find_missing_positions,
    has_required_image_count,
    is_vehicle,
)
from app.domain.value_objects.car_condition import CarCondition
from app.domain.value_objects.image_position import ImagePosition

REQUIRED_FIELDS = (
    "name",
    "brand",
    "model",
    "year",
    "condition",
    "price",
    "address",
    "city",
    "province",
)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _invalid_number(field: str) -> InputValidationError:
    return InputValidationError(UserMessagesID.invalid_number(field))


def _parse_float(value: NumericInput, field: str) -> Optional[float]:
    """Parse a non-negative, finite form number; blank means absent."""
    if _is_blank(value):
        return None
    # JSON true/false are not numbers
    if isinstance(value, bool):
        raise _invalid_number(field)
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        raise _invalid_number(field) from None
    if not math.isfinite(number) or number < 0:
        raise _invalid_number(field)
    return number


def _parse_int(value: NumericInput, field: str) -> Optional[int]:
    """Parse a non-negative whole form number; "2019.0" is accepted, "2019.9" is not."""
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise _invalid_number(field)
        return value
    number = _parse_float(value, field)
    if number is None:
        return None
    if not number.is_integer():
        raise _invalid_number(field)
    return int(number)


class CreateListing:
    """Use case for validating and storing a new car listing."""

    def __init__(self, car_repository: CarRepository) -> None:
        """
        Initialize create listing use case.

        Args:
            car_repository: Repository for car listings
        """
        self._car_repository = car_repository

    def _validate(self, request: CreateListingRequest) -> dict[str, Optional[float]]:
        """
        Apply the listing rules in order; raise on the first violation.

        Returns:
            Parsed numeric fields keyed by attribute name

        Raises:
            InputValidationError: With the message for the violated rule
        """
        missing = [field for field in REQUIRED_FIELDS if _is_blank(getattr(request, field))]
        if missing:
            raise InputValidationError(UserMessagesID.missing_listing_fields(missing))

        if request.condition not in {condition.value for condition in CarCondition}:
            raise InputValidationError(UserMessagesID.LISTING_INVALID_CONDITION)

        numbers = {
            "year": _parse_int(request.year, "year"),
            "price": _parse_float(request.price, "price"),
            "mileage": _parse_int(request.mileage, "mileage"),
            "tax_year": _parse_int(request.tax_year, "taxYear"),
        }

        if not is_vehicle(request.name, request.brand, request.model):
            raise InputValidationError(UserMessagesID.LISTING_NOT_A_VEHICLE)

        images = request.images or []
        if not has_required_image_count(len(images)):
            raise InputValidationError(UserMessagesID.LISTING_PHOTO_COUNT)

        # An image without a URL does not cover its position
        missing_positions = find_missing_positions(
            image.position for image in images if not _is_blank(image.url)
        )
        if missing_positions:
            raise InputValidationError(
                UserMessagesID.missing_photos(position.value for position in missing_positions)
            )

        return numbers

    async def execute(self, request: CreateListingRequest, auth: Optional[AuthContext]) -> Car:
        """
        Create a listing owned by the authenticated caller.

        Args:
            request: Listing payload
            auth: Resolved session capability, or None if unauthenticated

        Returns:
            Stored car with images and owner

        Raises:
            AuthenticationError: If there is no session
            InputValidationError: If the payload violates a listing rule
        """
        if auth is None:
            raise AuthenticationError(UserMessagesID.UNAUTHORIZED)

        numbers = self._validate(request)

        car = Car(
            user_id=auth.user_id,
            name=request.name.strip(),
            brand=request.brand.strip(),
            model=request.model.strip(),
            year=numbers["year"],
            description=_clean(request.description),
            condition=CarCondition(request.condition),
            price=numbers["price"],
            address=request.address.strip(),
            city=request.city.strip(),
            province=request.province.strip(),
            mileage=numbers["mileage"],
            transmission=_clean(request.transmission),
            fuel_type=_clean(request.fuel_type),
            color=_clean(request.color),
            tax_status=_clean(request.tax_status),
            tax_year=numbers["tax_year"],
            stnk_status=_clean(request.stnk_status),
        )
        car.images = [
            CarImage(position=ImagePosition(image.position), url=image.url, car_id=car.id)
            for image in request.images
        ]

        return await self._car_repository.add(car)
