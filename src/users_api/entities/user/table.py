"""User database table model."""

from sqlmodel import Field

from src.users_api.entities._base import EntityTable
from src.users_api.entities.user.entity import NAME_MAX_LENGTH


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    The email column is indexed but deliberately not unique: uniqueness
    is a service-level check.
    """

    __tablename__ = "users"

    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    last_name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(index=True, max_length=320)
