"""Transfer objects exchanged at the API boundary."""

from .user_dto import CreateUserDto, UpdateUserDto, UserDto

__all__ = ["CreateUserDto", "UpdateUserDto", "UserDto"]
