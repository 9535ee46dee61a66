"""HTTP routes."""

from typing import Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, Query, Response, status

from app.adapters.inbound.http.auth import SESSION_COOKIE_NAME, get_auth_context
from app.adapters.inbound.http.schemas import ErrorResponse, error_response
from app.application.dtos.auth import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from app.application.dtos.listing import (
    CarDetailResponse,
    CarResponse,
    ContactLinkResponse,
    CreateListingRequest,
    CreateListingResponse,
    ListingDetailResponse,
    ListingListResponse,
)
from app.application.dtos.user import (
    CurrentUser,
    RegisteredUser,
    RegisterUserRequest,
    RegisterUserResponse,
)
from app.application.errors import MarketplaceError
from app.application.use_cases.user_messages_id import UserMessagesID
from app.domain.entities.session import AuthContext
from app.domain.services.listing_filter import build_listing_filter
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import (
    log_listing_created,
    log_listing_search,
    log_listing_viewed,
    log_registration,
    log_request,
    logger,
)
from app.infrastructure.wiring.container import Container, get_container

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _unexpected_error(request_id: str, component: str, message: str) -> Response:
    """Log an unexpected failure with its traceback and hide the details from the client."""
    logger.exception(f"Unexpected error | request_id={request_id!r} | component={component!r}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterUserResponse,
    responses=_ERROR_RESPONSES,
)
async def register(
    request: RegisterUserRequest,
    container: Container = Depends(get_container),
):
    """
    Create an account.

    Dealers must provide a name tag photo; official dealers also a brand and
    start unverified.

    Args:
        request: Registration payload

    Returns:
        Created user (id, email, name, role)
    """
    request_id = str(uuid4())
    try:
        user = await container.register_user.execute(request)
    except MarketplaceError as err:
        log_registration(request_id, role=str(request.role), rejected_reason=err.message)
        return error_response(err.status_code, err.message)
    except Exception:
        return _unexpected_error(request_id, "registration", UserMessagesID.REGISTER_FAILED)

    log_registration(request_id, role=user.role.value, user_id=user.id)
    return RegisterUserResponse(
        message=UserMessagesID.REGISTER_SUCCESS,
        user=RegisteredUser.from_entity(user),
    )


@router.post(
    "/auth/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses=_ERROR_RESPONSES,
)
async def login(
    request: LoginRequest,
    response: Response,
    container: Container = Depends(get_container),
):
    """
    Start a session.

    The token is returned in the body and also set as an HTTP-only cookie.

    Args:
        request: Email and password

    Returns:
        Session token, expiry and the user's profile
    """
    request_id = str(uuid4())
    try:
        session, user = await container.authenticate_user.login(request.email, request.password)
    except MarketplaceError as err:
        log_request(request_id, "auth", outcome="rejected", reason=err.message)
        return error_response(err.status_code, err.message)
    except Exception:
        return _unexpected_error(request_id, "auth", UserMessagesID.LOGIN_FAILED)

    response.set_cookie(
        SESSION_COOKIE_NAME,
        session.token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
    )
    log_request(request_id, "auth", outcome="login", user_id=user.id)
    return LoginResponse(
        token=session.token,
        expires_at=session.expires_at,
        user=CurrentUser.from_entity(user),
    )


@router.post(
    "/auth/logout",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
)
async def logout(
    response: Response,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    container: Container = Depends(get_container),
):
    """End the current session."""
    if auth is None:
        return error_response(status.HTTP_401_UNAUTHORIZED, UserMessagesID.UNAUTHORIZED)

    request_id = str(uuid4())
    try:
        await container.authenticate_user.logout(auth)
    except Exception:
        return _unexpected_error(request_id, "auth", UserMessagesID.LOGOUT_FAILED)

    response.delete_cookie(SESSION_COOKIE_NAME)
    return MessageResponse(message=UserMessagesID.LOGOUT_SUCCESS)


@router.get(
    "/auth/me",
    status_code=status.HTTP_200_OK,
    response_model=CurrentUserResponse,
    responses=_ERROR_RESPONSES,
)
async def current_user(
    auth: Optional[AuthContext] = Depends(get_auth_context),
    container: Container = Depends(get_container),
):
    """Profile of the signed-in user."""
    if auth is None:
        return error_response(status.HTTP_401_UNAUTHORIZED, UserMessagesID.UNAUTHORIZED)

    request_id = str(uuid4())
    try:
        user = await container.authenticate_user.current_user(auth)
    except MarketplaceError as err:
        return error_response(err.status_code, err.message)
    except Exception:
        return _unexpected_error(request_id, "auth", UserMessagesID.PROFILE_FETCH_FAILED)
    return CurrentUserResponse(user=CurrentUser.from_entity(user))


@router.post(
    "/cars",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateListingResponse,
    responses=_ERROR_RESPONSES,
)
async def create_car(
    request: CreateListingRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    container: Container = Depends(get_container),
):
    """
    Create a listing for the signed-in seller.

    Requires exactly six photos, one per position, and a name/brand/model that
    reads as a car.

    Args:
        request: Listing payload

    Returns:
        Created car with images and seller summary
    """
    request_id = str(uuid4())
    try:
        car = await container.create_listing.execute(request, auth)
    except MarketplaceError as err:
        log_request(request_id, "listing", outcome="rejected", reason=err.message)
        return error_response(err.status_code, err.message)
    except Exception:
        return _unexpected_error(request_id, "listing", UserMessagesID.LISTING_CREATE_FAILED)

    log_listing_created(request_id, car_id=car.id, user_id=car.user_id, images=len(car.images))
    return CreateListingResponse(
        message=UserMessagesID.LISTING_CREATED,
        car=CarResponse.from_entity(car),
    )


@router.get(
    "/cars",
    status_code=status.HTTP_200_OK,
    response_model=ListingListResponse,
    responses=_ERROR_RESPONSES,
)
async def list_cars(
    condition: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    city: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    container: Container = Depends(get_container),
):
    """
    Browse active listings, newest first.

    Args:
        condition: BARU or BEKAS
        brand: Exact brand
        min_price: Inclusive minimum price
        max_price: Inclusive maximum price
        city: Case-insensitive city substring
        search: Case-insensitive substring of name, brand or model

    Returns:
        Every matching listing
    """
    request_id = str(uuid4())
    listing_filter = build_listing_filter(
        condition=condition,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
        city=city,
        search=search,
    )
    try:
        cars = await container.search_listings.execute(listing_filter)
    except Exception:
        return _unexpected_error(request_id, "search", UserMessagesID.LISTING_FETCH_FAILED)

    log_listing_search(request_id, listing_filter.active_criteria(), len(cars))
    return ListingListResponse(cars=[CarResponse.from_entity(car) for car in cars])


@router.get(
    "/cars/{car_id}",
    status_code=status.HTTP_200_OK,
    response_model=ListingDetailResponse,
    responses=_ERROR_RESPONSES,
)
async def get_car(car_id: str, container: Container = Depends(get_container)):
    """
    Get one listing and count the view.

    Args:
        car_id: Car identifier

    Returns:
        Listing with photos in position order and the seller profile
    """
    request_id = str(uuid4())
    try:
        car = await container.get_listing_detail.execute(car_id)
    except MarketplaceError as err:
        return error_response(err.status_code, err.message)
    except Exception:
        return _unexpected_error(request_id, "detail", UserMessagesID.LISTING_FETCH_FAILED)

    log_listing_viewed(request_id, car_id=car.id, views_before=car.views)
    return ListingDetailResponse(car=CarDetailResponse.from_entity(car))


@router.get(
    "/cars/{car_id}/contact",
    status_code=status.HTTP_200_OK,
    response_model=ContactLinkResponse,
    responses=_ERROR_RESPONSES,
)
async def get_car_contact(car_id: str, container: Container = Depends(get_container)):
    """
    WhatsApp link for asking the seller about a listing.

    Args:
        car_id: Car identifier

    Returns:
        Click-to-chat URL with a prefilled message
    """
    request_id = str(uuid4())
    try:
        link = await container.get_contact_link.execute(car_id)
    except MarketplaceError as err:
        return error_response(err.status_code, err.message)
    except Exception:
        return _unexpected_error(request_id, "contact", UserMessagesID.CONTACT_LINK_FAILED)

    return ContactLinkResponse(url=link.url, phone=link.phone, message=link.message)
