"""Register user use case."""

from typing import Callable

from app.application.dtos.user import RegisterUserRequest
from app.application.errors import InputValidationError
from app.application.ports.user_repository import UserRepository
from app.application.use_cases.user_messages_id import UserMessagesID
from app.domain.entities.user import User
from app.domain.value_objects.user_role import UserRole


class RegisterUser:
    """Use case for creating accounts with role-dependent requirements."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: Callable[[str], str],
        min_password_length: int = 6,
    ) -> None:
        """
        Initialize register user use case.

        Args:
            user_repository: Repository for users
            password_hasher: One-way hash function applied to the plaintext password
            min_password_length: Minimum accepted password length
        """
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._min_password_length = min_password_length

    async def execute(self, request: RegisterUserRequest) -> User:
        """
        Validate and create a new account.

        Args:
            request: Registration payload

        Returns:
            Created user

        Raises:
            InputValidationError: If a registration rule is violated
        """
        required = [request.email, request.password, request.name, request.phone, request.role]
        if not all(required):
            raise InputValidationError(UserMessagesID.REGISTER_MISSING_FIELDS)

        try:
            role = UserRole.parse(request.role)
        except ValueError:
            raise InputValidationError(UserMessagesID.REGISTER_INVALID_ROLE) from None

        if role.is_dealer and not request.name_tag_url:
            raise InputValidationError(UserMessagesID.REGISTER_NAME_TAG_REQUIRED)

        if role is UserRole.DEALER_OFFICIAL and not request.dealer_brand:
            raise InputValidationError(UserMessagesID.REGISTER_DEALER_BRAND_REQUIRED)

        if len(request.password) < self._min_password_length:
            raise InputValidationError(
                UserMessagesID.password_too_short(self._min_password_length)
            )

        if await self._user_repository.get_by_email(request.email) is not None:
            raise InputValidationError(UserMessagesID.REGISTER_EMAIL_EXISTS)

        user = User.register(
            email=request.email,
            password_hash=self._password_hasher(request.password),
            name=request.name,
            phone=request.phone,
            role=role,
            dealer_brand=request.dealer_brand,
            name_tag_url=request.name_tag_url,
        )
        return await self._user_repository.add(user)
