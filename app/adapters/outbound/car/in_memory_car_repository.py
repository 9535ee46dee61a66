"""In-memory car repository adapter."""

import copy
from typing import Optional

from app.application.ports.car_repository import CarRepository
from app.application.ports.user_repository import UserRepository
from app.domain.entities.listing import Car
from app.domain.services.listing_filter import ListingFilter


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of car repository.

    Owners are joined from the user repository on every read.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """
        Initialize in-memory repository.

        Args:
            user_repository: Source of listing owners
        """
        self._user_repository = user_repository
        self._storage: dict[str, Car] = {}

    async def _with_owner(self, car: Car) -> Car:
        """Return a detached copy of a stored car with its owner loaded."""
        result = copy.deepcopy(car)
        result.owner = await self._user_repository.get(car.user_id)
        return result

    async def add(self, car: Car) -> Car:
        """
        Store a car and its images.

        Args:
            car: Car entity with images

        Returns:
            Stored car with owner loaded
        """
        stored = copy.deepcopy(car)
        stored.owner = None
        for image in stored.images:
            image.car_id = stored.id
        self._storage[stored.id] = stored
        return await self._with_owner(stored)

    async def get(self, car_id: str) -> Optional[Car]:
        """
        Get a car by id.

        Args:
            car_id: Car identifier

        Returns:
            Car with images and owner, or None if not found
        """
        car = self._storage.get(car_id)
        if car is None:
            return None
        return await self._with_owner(car)

    async def search(self, listing_filter: ListingFilter) -> list[Car]:
        """
        Find cars matching a filter, newest first.

        Args:
            listing_filter: Search criteria

        Returns:
            Matching cars with images and owner
        """
        matches = [car for car in self._storage.values() if listing_filter.matches(car)]
        matches.sort(key=lambda car: car.created_at, reverse=True)
        return [await self._with_owner(car) for car in matches]

    async def increment_views(self, car_id: str) -> None:
        """
        Add one to a car's view counter.

        Args:
            car_id: Car identifier
        """
        car = self._storage.get(car_id)
        if car is not None:
            car.views += 1
