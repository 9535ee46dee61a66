"""Seller contact handoff use case."""

from app.application.errors import NotFoundError
from app.application.ports.car_repository import CarRepository
from app.application.use_cases.user_messages_id import UserMessagesID
from app.domain.services.contact_link import ContactLink, build_contact_link


class GetContactLink:
    """Use case for building a WhatsApp link to a listing's seller."""

    def __init__(
        self,
        car_repository: CarRepository,
        base_url: str = "https://wa.me",
        country_code: str = "62",
    ) -> None:
        """
        Initialize get contact link use case.

        Args:
            car_repository: Repository for car listings
            base_url: WhatsApp click-to-chat base URL
            country_code: Country calling code for local phone numbers
        """
        self._car_repository = car_repository
        self._base_url = base_url
        self._country_code = country_code

    async def execute(self, car_id: str) -> ContactLink:
        """
        Build the contact link without counting a view.

        Raises:
            NotFoundError: If the car or its seller does not exist
        """
        car = await self._car_repository.get(car_id)
        if car is None or car.owner is None:
            raise NotFoundError(UserMessagesID.LISTING_NOT_FOUND)

        return build_contact_link(
            car,
            car.owner.phone,
            base_url=self._base_url,
            country_code=self._country_code,
        )
