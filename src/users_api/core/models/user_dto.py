"""User transfer objects.

Field names are snake_case in Python and camelCase on the wire; input
models accept both spellings.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from src.users_api.entities.user.entity import NAME_MAX_LENGTH, User


class UserDto(BaseModel):
    """Read-only projection of a User returned to clients."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "3f0c5a52-4a0e-4f0e-9a7a-0b7b8f0d2c11",
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane.doe@example.com",
            }
        },
    )

    id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDto":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class UserInputDto(BaseModel):
    """Fields a client supplies when creating or replacing a user."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane.doe@example.com",
            }
        },
    )

    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr


class CreateUserDto(UserInputDto):
    """Payload for ``POST /users``; the identifier is assigned by the system."""


class UpdateUserDto(UserInputDto):
    """Payload for ``PUT /users/{id}``; the target comes from the path."""
