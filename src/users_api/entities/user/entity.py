"""User domain entity."""

from typing import Any

from pydantic import ConfigDict, EmailStr, Field

from src.users_api.entities._base import Entity

NAME_MAX_LENGTH = 100


class User(Entity):
    """User entity representing a person in the system.

    Names must be non-blank and the email well formed. Invariants are
    checked on construction and again on every attribute assignment.
    """

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    first_name: str = Field(
        min_length=1, max_length=NAME_MAX_LENGTH, description="User's first name"
    )
    last_name: str = Field(
        min_length=1, max_length=NAME_MAX_LENGTH, description="User's last name"
    )
    email: EmailStr = Field(description="User's email address, unique across users")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.first_name,
            self.last_name,
            self.email,
        ))
