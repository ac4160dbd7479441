"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

from src.users_api.core.services import DbManageService, DbSessionService, UserService
from src.users_api.entities.user.repository import SqlUserRepository
from src.users_api.runtime.context import get_config

# Initialize Rich console for colored output
console = Console()


@contextmanager
def open_user_service() -> Iterator[UserService]:
    """Yield a UserService over the configured SQL database."""
    db_service = DbSessionService(get_config())
    DbManageService(db_service.engine).create_all()
    session = db_service.get_session()
    try:
        yield UserService(SqlUserRepository(session))
    finally:
        session.close()
        db_service.dispose()
