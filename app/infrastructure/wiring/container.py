"""Dependency injection container."""

from typing import Optional

from app.application.ports.car_repository import CarRepository
from app.application.ports.session_repository import SessionRepository
from app.application.ports.user_repository import UserRepository
from app.application.use_cases.authenticate_user import AuthenticateUser
from app.application.use_cases.create_listing import CreateListing
from app.application.use_cases.get_contact_link import GetContactLink
from app.application.use_cases.get_listing_detail import GetListingDetail
from app.application.use_cases.register_user import RegisterUser
from app.application.use_cases.search_listings import SearchListings
from app.infrastructure.wiring.dependencies import (
    create_authenticate_user,
    create_car_repository,
    create_get_contact_link,
    create_listing_use_cases,
    create_register_user,
    create_session_repository,
    create_user_repository,
)


class Container:
    """Dependency injection container."""

    def __init__(
        self,
        user_repository: Optional[UserRepository] = None,
        car_repository: Optional[CarRepository] = None,
        session_repository: Optional[SessionRepository] = None,
    ) -> None:
        """
        Initialize container with dependencies.

        Args:
            user_repository: Optional override (defaults to the configured backend)
            car_repository: Optional override (defaults to the configured backend)
            session_repository: Optional override (defaults to the configured backend)
        """
        # Repositories
        self._user_repository = user_repository or create_user_repository()
        self._car_repository = car_repository or create_car_repository(self._user_repository)
        self._session_repository = session_repository or create_session_repository()

        # Use cases
        self._register_user = create_register_user(self._user_repository)
        self._authenticate_user = create_authenticate_user(
            self._user_repository, self._session_repository
        )
        (
            self._create_listing,
            self._search_listings,
            self._get_listing_detail,
        ) = create_listing_use_cases(self._car_repository)
        self._get_contact_link = create_get_contact_link(self._car_repository)

    @property
    def user_repository(self) -> UserRepository:
        """Get user repository."""
        return self._user_repository

    @property
    def car_repository(self) -> CarRepository:
        """Get car repository."""
        return self._car_repository

    @property
    def register_user(self) -> RegisterUser:
        """Get register user use case."""
        return self._register_user

    @property
    def authenticate_user(self) -> AuthenticateUser:
        """Get authenticate user use case."""
        return self._authenticate_user

    @property
    def create_listing(self) -> CreateListing:
        """Get create listing use case."""
        return self._create_listing

    @property
    def search_listings(self) -> SearchListings:
        """Get search listings use case."""
        return self._search_listings

    @property
    def get_listing_detail(self) -> GetListingDetail:
        """Get listing detail use case."""
        return self._get_listing_detail

    @property
    def get_contact_link(self) -> GetContactLink:
        """Get contact link use case."""
        return self._get_contact_link


_container: Optional[Container] = None


def get_container() -> Container:
    """
    Get the process-wide container, creating it on first use.

    Used as a FastAPI dependency so tests can override it.

    Returns:
        Container instance
    """
    global _container
    if _container is None:
        _container = Container()
    return _container
