"""Unit tests for Postgres car repository using SQLite in-memory."""

from datetime import datetime, timedelta, timezone

import pytest

from app.adapters.outbound.car.postgres_car_repository import PostgresCarRepository
from app.adapters.outbound.user.postgres_user_repository import PostgresUserRepository
from app.domain.entities.listing import Car, CarImage
from app.domain.entities.user import User
from app.domain.services.listing_filter import ListingFilter, build_listing_filter
from app.domain.value_objects.car_condition import CarCondition
from app.domain.value_objects.image_position import ImagePosition
from app.domain.value_objects.user_role import UserRole

BASE_TIME = datetime(2024, 5, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repositories(sqlite_session_factory, monkeypatch):
    """Car and user repositories sharing one SQLite database."""

    def get_test_db_session():
        return sqlite_session_factory()

    for module in ("car.postgres_car_repository", "user.postgres_user_repository"):
        monkeypatch.setattr(
            f"app.adapters.outbound.{module}.get_db_session",
            get_test_db_session,
        )

    return PostgresCarRepository(), PostgresUserRepository()


@pytest.fixture
async def seller(repositories) -> User:
    """Stored semi dealer."""
    _, user_repository = repositories
    return await user_repository.add(
        User.register(
            email="showroom@example.com",
            password_hash="hashed",
            name="Showroom Jaya",
            phone="081234567890",
            role=UserRole.DEALER_SEMI,
            name_tag_url="https://cdn.example.com/tag.jpg",
        )
    )


def _car(seller: User, minutes: int, **overrides) -> Car:
    fields = {
        "user_id": seller.id,
        "name": "Mobil Keluarga",
        "brand": "Toyota",
        "model": "Avanza",
        "year": 2019,
        "condition": CarCondition.BEKAS,
        "price": 150_000_000.0,
        "address": "Jl. Sudirman No. 1",
        "city": "Jakarta Selatan",
        "province": "DKI Jakarta",
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    car = Car(**fields)
    car.images = [
        CarImage(position=position, url=f"https://cdn.example.com/{position.value}.jpg")
        for position in ImagePosition
    ]
    return car


@pytest.mark.asyncio
async def test_add_stores_car_with_images_and_owner(repositories, seller):
    """A car and its six images are stored together and read back with the owner."""
    car_repository, _ = repositories
    car = _car(seller, 0, mileage=45000, tax_year=None, fuel_type="Bensin")

    stored = await car_repository.add(car)

    assert stored.id == car.id
    assert stored.mileage == 45000
    assert stored.tax_year is None
    assert stored.fuel_type == "Bensin"
    assert stored.condition is CarCondition.BEKAS
    assert stored.views == 0
    assert stored.is_active is True
    assert len(stored.images) == 6
    assert {image.position for image in stored.images} == set(ImagePosition)
    assert all(image.car_id == car.id for image in stored.images)
    assert stored.owner is not None
    assert stored.owner.name == "Showroom Jaya"
    assert stored.owner.role is UserRole.DEALER_SEMI
    assert stored.created_at == BASE_TIME


@pytest.mark.asyncio
async def test_get_missing_car(repositories):
    """Unknown ids return None."""
    car_repository, _ = repositories

    assert await car_repository.get("missing") is None


@pytest.mark.asyncio
async def test_search_newest_first_and_active_only(repositories, seller):
    """Search excludes inactive cars and orders by creation time descending."""
    car_repository, _ = repositories
    older = await car_repository.add(_car(seller, 0))
    newer = await car_repository.add(_car(seller, 30))
    await car_repository.add(_car(seller, 60, is_active=False))

    cars = await car_repository.search(ListingFilter())

    assert [car.id for car in cars] == [newer.id, older.id]


@pytest.mark.asyncio
async def test_search_price_bounds_inclusive(repositories, seller):
    """minPrice and maxPrice are inclusive bounds."""
    car_repository, _ = repositories
    for minutes, price in enumerate([90_000_000.0, 100_000_000.0, 200_000_000.0, 250_000_000.0]):
        await car_repository.add(_car(seller, minutes, price=price))

    cars = await car_repository.search(
        build_listing_filter(min_price="100000000", max_price="200000000")
    )

    assert sorted(car.price for car in cars) == [100_000_000.0, 200_000_000.0]


@pytest.mark.asyncio
async def test_search_text_matches_name_brand_or_model(repositories, seller):
    """search is a case-insensitive substring of name, brand or model."""
    car_repository, _ = repositories
    by_model = await car_repository.add(_car(seller, 0, name="Mobil A", model="Avanza G"))
    by_name = await car_repository.add(
        _car(seller, 1, name="Jual avanza murah", brand="Daihatsu", model="Xenia")
    )
    await car_repository.add(_car(seller, 2, name="Mobil B", brand="Honda", model="Jazz"))

    cars = await car_repository.search(build_listing_filter(search="AVANZA"))

    assert {car.id for car in cars} == {by_model.id, by_name.id}


@pytest.mark.asyncio
async def test_search_exact_and_contains_filters(repositories, seller):
    """condition and brand match exactly, city matches as a substring."""
    car_repository, _ = repositories
    match = await car_repository.add(
        _car(seller, 0, condition=CarCondition.BARU, brand="Honda", city="Kota Bandung")
    )
    await car_repository.add(_car(seller, 1, condition=CarCondition.BEKAS, brand="Honda"))
    await car_repository.add(_car(seller, 2, condition=CarCondition.BARU, brand="Hondaa"))

    cars = await car_repository.search(
        build_listing_filter(condition="BARU", brand="Honda", city="bandung")
    )

    assert [car.id for car in cars] == [match.id]


@pytest.mark.asyncio
async def test_search_city_treats_wildcards_literally(repositories, seller):
    """LIKE wildcards in the city filter are escaped."""
    car_repository, _ = repositories
    await car_repository.add(_car(seller, 0, city="Jakarta"))

    assert await car_repository.search(build_listing_filter(city="%")) == []


@pytest.mark.asyncio
async def test_increment_views(repositories, seller):
    """Each increment adds exactly one view."""
    car_repository, _ = repositories
    car = await car_repository.add(_car(seller, 0))

    await car_repository.increment_views(car.id)
    await car_repository.increment_views(car.id)

    assert (await car_repository.get(car.id)).views == 2


@pytest.mark.asyncio
async def test_increment_views_unknown_car(repositories, seller):
    """Incrementing an unknown id changes nothing."""
    car_repository, _ = repositories
    car = await car_repository.add(_car(seller, 0))

    await car_repository.increment_views("missing")

    assert (await car_repository.get(car.id)).views == 0
