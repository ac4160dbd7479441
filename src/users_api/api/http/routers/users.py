"""User API router with CRUD operations.

The router only translates: service outcomes become status codes and
domain errors become ``{"message": ...}`` bodies.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from src.users_api.api.http.deps import get_user_service
from src.users_api.core.exceptions import (
    USER_NOT_FOUND,
    ConflictError,
    InvalidArgumentError,
)
from src.users_api.core.models.user_dto import CreateUserDto, UpdateUserDto, UserDto
from src.users_api.core.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserDto])
async def list_users(service: UserService = Depends(get_user_service)) -> list[UserDto]:
    """List all users."""
    return await service.get_all()


@router.get("/{user_id}", response_model=UserDto)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Get a user by ID."""
    user = await service.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.post("", response_model=UserDto, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: CreateUserDto,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Create a new user."""
    try:
        user = await service.create(payload)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    path = request.app.url_path_for("get_user", user_id=user.id)
    response.headers["Location"] = request.scope.get("root_path", "").rstrip("/") + str(path)
    return user


@router.put("/{user_id}", response_model=UserDto)
async def update_user(
    user_id: str,
    payload: UpdateUserDto,
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Replace the names and email of a user."""
    try:
        user = await service.update(user_id, payload)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user."""
    if not await service.delete(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
