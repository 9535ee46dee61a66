"""Car repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.listing import Car
from app.domain.services.listing_filter import ListingFilter


class CarRepository(ABC):
    """Port interface for car listings.

    Every returned Car has its images and owner loaded.
    """

    @abstractmethod
    async def add(self, car: Car) -> Car:
        """
        Persist a car together with its images in one transaction.

        Args:
            car: Car entity with images attached

        Returns:
            The stored car with owner loaded
        """
        pass

    @abstractmethod
    async def get(self, car_id: str) -> Optional[Car]:
        """
        Get a car by id.

        Args:
            car_id: Car identifier

        Returns:
            Car entity, or None if not found
        """
        pass

    @abstractmethod
    async def search(self, listing_filter: ListingFilter) -> list[Car]:
        """
        Find cars matching a filter, newest first.

        Args:
            listing_filter: Search criteria

        Returns:
            Every matching car (no pagination)
        """
        pass

    @abstractmethod
    async def increment_views(self, car_id: str) -> None:
        """
        Add one to a car's view counter.

        Args:
            car_id: Car identifier
        """
        pass
