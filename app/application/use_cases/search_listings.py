"""Search listings use case."""

from app.application.ports.car_repository import CarRepository
from app.domain.entities.listing import Car
from app.domain.services.listing_filter import ListingFilter


class SearchListings:
    """Use case for browsing active listings."""

    def __init__(self, car_repository: CarRepository) -> None:
        """
        Initialize search listings use case.

        Args:
            car_repository: Repository for car listings
        """
        self._car_repository = car_repository

    async def execute(self, listing_filter: ListingFilter) -> list[Car]:
        """
        Find active listings matching the filter, newest first.

        Args:
            listing_filter: Search criteria

        Returns:
            Matching cars
        """
        return await self._car_repository.search(listing_filter)
