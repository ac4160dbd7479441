"""Entities organized by business concept.

Each entity has its own package containing:
- entity.py: Domain model with its field invariants
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .user import InMemoryUserRepository, SqlUserRepository, User, UserRepository, UserTable

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "SqlUserRepository",
    "InMemoryUserRepository",
]
