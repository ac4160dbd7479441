"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .user.user_service import UserService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "UserService",
]
