"""Get listing detail use case."""

from app.application.errors import NotFoundError
from app.application.ports.car_repository import CarRepository
from app.application.use_cases.user_messages_id import UserMessagesID
from app.domain.entities.listing import Car


class GetListingDetail:
    """Use case for fetching one listing and counting the view."""

    def __init__(self, car_repository: CarRepository) -> None:
        """
        Initialize get listing detail use case.

        Args:
            car_repository: Repository for car listings
        """
        self._car_repository = car_repository

    async def execute(self, car_id: str) -> Car:
        """
        Fetch a listing, then increment its view counter.

        The returned car reflects the read before the increment. Every
        successful fetch counts, with no per-viewer deduplication.

        Args:
            car_id: Car identifier

        Returns:
            Car with images and owner

        Raises:
            NotFoundError: If the car does not exist
        """
        car = await self._car_repository.get(car_id)
        if car is None:
            raise NotFoundError(UserMessagesID.LISTING_NOT_FOUND)

        await self._car_repository.increment_views(car_id)
        return car
