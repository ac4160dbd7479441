"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request

from src.users_api.api.http.app_data import ApplicationDependencies
from src.users_api.core.services import UserService
from src.users_api.entities.user.repository import SqlUserRepository, UserRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the infrastructure created during application startup."""
    return request.app.state.app_dependencies


def get_user_repository(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[UserRepository]:
    """Yield the configured user repository, one SQL session per request."""
    if app_deps.user_repository is not None:
        yield app_deps.user_repository
        return

    if app_deps.database_service is None:
        raise RuntimeError("No user storage configured")

    session = app_deps.database_service.get_session()
    try:
        yield SqlUserRepository(session)
    finally:
        session.close()


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Get a UserService bound to the request's repository."""
    return UserService(repository)
