"""Schema management for the users database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

# Registers the users table with SQLModel metadata
from src.users_api.entities.user.table import UserTable  # noqa: F401


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Database tables dropped.")
