from loguru import logger
from pydantic import ValidationError

from src.users_api.core.exceptions import (
    USER_ALREADY_EXISTS,
    ConflictError,
    InvalidArgumentError,
    format_validation_errors,
)
from src.users_api.core.models.user_dto import CreateUserDto, UpdateUserDto, UserDto
from src.users_api.entities.user.entity import User
from src.users_api.entities.user.repository import UserRepository


class UserService:
    """Business rules for user records.

    Enforces email uniqueness on create and maps entities to DTOs. Field
    shape is validated by the DTOs and the entity; entity validation
    failures are reported as InvalidArgumentError.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    async def get_all(self) -> list[UserDto]:
        users = await self._repository.get_all()
        return [UserDto.from_entity(user) for user in users]

    async def get_by_id(self, user_id: str) -> UserDto | None:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            logger.debug("User {} not found", user_id)
            return None
        return UserDto.from_entity(user)

    async def create(self, dto: CreateUserDto) -> UserDto:
        """Create a user from ``dto``.

        Raises:
            ConflictError: Another user already owns ``dto.email``.
            InvalidArgumentError: The fields violate the entity invariants.
        """
        # Check-then-add is not atomic; concurrent creates can both pass.
        existing = await self._repository.get_by_email(dto.email)
        if existing is not None:
            logger.warning("Rejected user creation: email belongs to user {}", existing.id)
            raise ConflictError(USER_ALREADY_EXISTS)

        try:
            user = User(first_name=dto.first_name, last_name=dto.last_name, email=dto.email)
        except ValidationError as e:
            raise InvalidArgumentError(format_validation_errors(e.errors())) from e

        created = await self._repository.add(user)
        logger.info("Created user {}", created.id)
        return UserDto.from_entity(created)

    async def update(self, user_id: str, dto: UpdateUserDto) -> UserDto | None:
        """Overwrite the mutable fields of an existing user.

        Returns ``None`` when ``user_id`` does not exist. The new email is not
        checked against other users.

        Raises:
            InvalidArgumentError: The fields violate the entity invariants.
        """
        user = await self._repository.get_by_id(user_id)
        if user is None:
            logger.debug("Update skipped, user {} not found", user_id)
            return None

        try:
            user.first_name = dto.first_name
            user.last_name = dto.last_name
            user.email = dto.email
        except ValidationError as e:
            raise InvalidArgumentError(format_validation_errors(e.errors())) from e

        updated = await self._repository.update(user)
        logger.info("Updated user {}", updated.id)
        return UserDto.from_entity(updated)

    async def delete(self, user_id: str) -> bool:
        if not await self._repository.exists(user_id):
            logger.debug("Delete skipped, user {} not found", user_id)
            return False

        await self._repository.delete(user_id)
        logger.info("Deleted user {}", user_id)
        return True
