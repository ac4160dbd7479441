"""Database initialization script."""

from src.users_api.core.services import DbManageService, DbSessionService
from src.users_api.runtime.context import get_config


def init_db() -> None:
    """Create all database tables for the configured database."""
    db_service = DbSessionService(get_config())
    try:
        DbManageService(db_service.engine).create_all()
    finally:
        db_service.dispose()


if __name__ == "__main__":
    init_db()
