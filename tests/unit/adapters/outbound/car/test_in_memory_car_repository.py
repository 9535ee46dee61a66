"""Unit tests for in-memory car repository."""

from datetime import datetime, timezone

import pytest

from app.adapters.outbound.car import InMemoryCarRepository
from app.adapters.outbound.user import InMemoryUserRepository
from app.domain.entities.listing import Car, CarImage
from app.domain.entities.user import User
from app.domain.services.listing_filter import ListingFilter
from app.domain.value_objects.car_condition import CarCondition
from app.domain.value_objects.image_position import ImagePosition
from app.domain.value_objects.user_role import UserRole


@pytest.fixture
async def seller_and_repository():
    """Consumer seller and a car repository joined to its user repository."""
    user_repository = InMemoryUserRepository()
    seller = await user_repository.add(
        User.register(
            email="budi@example.com",
            password_hash="hashed",
            name="Budi",
            phone="081234567890",
            role=UserRole.CONSUMER,
        )
    )
    return seller, InMemoryCarRepository(user_repository)


def _car(user_id: str) -> Car:
    car = Car(
        user_id=user_id,
        name="Mobil Keluarga",
        brand="Toyota",
        model="Avanza",
        year=2019,
        condition=CarCondition.BEKAS,
        price=150_000_000.0,
        address="Jl. Sudirman No. 1",
        city="Jakarta Selatan",
        province="DKI Jakarta",
        created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
    )
    car.images = [CarImage(position=position, url="https://x/y.jpg") for position in ImagePosition]
    return car


@pytest.mark.asyncio
async def test_reads_are_detached_copies(seller_and_repository):
    """Mutating a returned car does not change storage."""
    seller, repository = seller_and_repository
    car = await repository.add(_car(seller.id))

    fetched = await repository.get(car.id)
    fetched.views = 99
    fetched.images.clear()

    stored = await repository.get(car.id)
    assert stored.views == 0
    assert len(stored.images) == 6


@pytest.mark.asyncio
async def test_owner_joined_on_read(seller_and_repository):
    """Owner is loaded from the user repository."""
    seller, repository = seller_and_repository
    car = await repository.add(_car(seller.id))

    cars = await repository.search(ListingFilter())

    assert car.owner.id == seller.id
    assert cars[0].owner.email == "budi@example.com"


@pytest.mark.asyncio
async def test_images_linked_to_car(seller_and_repository):
    """Stored images carry the car id."""
    seller, repository = seller_and_repository
    car = _car(seller.id)

    stored = await repository.add(car)

    assert all(image.car_id == car.id for image in stored.images)


@pytest.mark.asyncio
async def test_increment_views_unknown_car_is_noop(seller_and_repository):
    """Unknown ids are ignored."""
    seller, repository = seller_and_repository
    car = await repository.add(_car(seller.id))

    await repository.increment_views("missing")

    assert (await repository.get(car.id)).views == 0
