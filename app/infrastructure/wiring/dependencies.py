"""Dependency injection factory functions."""

from app.adapters.outbound.car import InMemoryCarRepository, PostgresCarRepository
from app.adapters.outbound.session import InMemorySessionRepository, PostgresSessionRepository
from app.adapters.outbound.user import InMemoryUserRepository, PostgresUserRepository
from app.application.ports.car_repository import CarRepository
from app.application.ports.session_repository import SessionRepository
from app.application.ports.user_repository import UserRepository
from app.application.use_cases.authenticate_user import AuthenticateUser
from app.application.use_cases.create_listing import CreateListing
from app.application.use_cases.get_contact_link import GetContactLink
from app.application.use_cases.get_listing_detail import GetListingDetail
from app.application.use_cases.register_user import RegisterUser
from app.application.use_cases.search_listings import SearchListings
from app.infrastructure.config.settings import settings
from app.infrastructure.security.passwords import hash_password, verify_password


def _use_postgres() -> bool:
    """
    Check whether repositories should be backed by the database.

    Returns:
        True when REPOSITORY_BACKEND=postgres

    Raises:
        ValueError: If postgres is selected without DATABASE_URL
    """
    if settings.repository_backend != "postgres":
        return False
    if not settings.database_url:
        raise ValueError("DATABASE_URL is required when REPOSITORY_BACKEND=postgres")
    return True


def create_user_repository() -> UserRepository:
    """
    Factory function to create user repository.

    Returns:
        UserRepository instance
    """
    if _use_postgres():
        return PostgresUserRepository()
    return InMemoryUserRepository()


def create_car_repository(user_repository: UserRepository) -> CarRepository:
    """
    Factory function to create car repository.

    Args:
        user_repository: Owner source for the in-memory backend

    Returns:
        CarRepository instance
    """
    if _use_postgres():
        return PostgresCarRepository()
    return InMemoryCarRepository(user_repository)


def create_session_repository() -> SessionRepository:
    """
    Factory function to create session repository.

    Returns:
        SessionRepository instance
    """
    if _use_postgres():
        return PostgresSessionRepository()
    return InMemorySessionRepository()


def create_register_user(user_repository: UserRepository) -> RegisterUser:
    """Factory function to create RegisterUser with werkzeug password hashing."""
    return RegisterUser(
        user_repository,
        password_hasher=hash_password,
        min_password_length=settings.min_password_length,
    )


def create_authenticate_user(
    user_repository: UserRepository,
    session_repository: SessionRepository,
) -> AuthenticateUser:
    """Factory function to create AuthenticateUser."""
    return AuthenticateUser(
        user_repository,
        session_repository,
        password_verifier=verify_password,
        session_ttl_seconds=settings.session_ttl_seconds,
    )


def create_get_contact_link(car_repository: CarRepository) -> GetContactLink:
    """Factory function to create GetContactLink."""
    return GetContactLink(
        car_repository,
        base_url=settings.whatsapp_base_url,
        country_code=settings.phone_country_code,
    )


def create_listing_use_cases(
    car_repository: CarRepository,
) -> tuple[CreateListing, SearchListings, GetListingDetail]:
    """
    Factory function to create the listing use cases sharing one repository.

    Returns:
        Tuple of (CreateListing, SearchListings, GetListingDetail)
    """
    return (
        CreateListing(car_repository),
        SearchListings(car_repository),
        GetListingDetail(car_repository),
    )
