"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- UserTable: Database persistence model
- UserRepository: Data access protocol, with SQL and in-memory implementations
"""

from .entity import User
from .repository import InMemoryUserRepository, SqlUserRepository, UserRepository
from .table import UserTable

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "SqlUserRepository",
    "InMemoryUserRepository",
]
