"""User repositories.

``UserRepository`` is the persistence contract consumed by the service
layer. Every operation is a coroutine and atomic from the caller's point
of view: either the write is committed or nothing is observable.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol, runtime_checkable

from loguru import logger
from sqlmodel import Session, select
from starlette.concurrency import run_in_threadpool

from src.users_api.entities._base import utcnow
from src.users_api.entities.user.entity import User
from src.users_api.entities.user.table import UserTable


@runtime_checkable
class UserRepository(Protocol):
    """Persistence operations over User entities."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_all(self) -> list[User]: ...

    async def add(self, user: User) -> User: ...

    async def update(self, user: User) -> User: ...

    async def exists(self, user_id: str) -> bool: ...

    async def delete(self, user_id: str) -> None: ...


class SqlUserRepository:
    """SQLModel-backed user repository bound to a single session.

    The session is synchronous, so each operation runs in the threadpool
    and the event loop stays free while the database works.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        try:
            yield self._session
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error(
                "User repository transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

    @staticmethod
    def _to_entity(row: UserTable) -> User:
        return User.model_validate(row, from_attributes=True)

    def _get_by_id(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return self._to_entity(row)

    def _get_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def _get_all(self) -> list[User]:
        # id breaks ties between rows created in the same clock tick
        statement = select(UserTable).order_by(UserTable.created_at, UserTable.id)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def _add(self, user: User) -> User:
        row = UserTable(**user.model_dump())
        with self._transaction() as session:
            session.add(row)
        self._session.refresh(row)
        return self._to_entity(row)

    def _update(self, user: User) -> User:
        row = self._session.get(UserTable, user.id)
        if row is None:
            raise LookupError(f"User {user.id} does not exist")

        row.first_name = user.first_name
        row.last_name = user.last_name
        row.email = user.email
        row.updated_at = utcnow()
        with self._transaction() as session:
            session.add(row)
        self._session.refresh(row)
        return self._to_entity(row)

    def _exists(self, user_id: str) -> bool:
        statement = select(UserTable.id).where(UserTable.id == user_id)
        return self._session.exec(statement).first() is not None

    def _delete(self, user_id: str) -> None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return
        with self._transaction() as session:
            session.delete(row)

    async def get_by_id(self, user_id: str) -> User | None:
        return await run_in_threadpool(self._get_by_id, user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await run_in_threadpool(self._get_by_email, email)

    async def get_all(self) -> list[User]:
        return await run_in_threadpool(self._get_all)

    async def add(self, user: User) -> User:
        return await run_in_threadpool(self._add, user)

    async def update(self, user: User) -> User:
        return await run_in_threadpool(self._update, user)

    async def exists(self, user_id: str) -> bool:
        return await run_in_threadpool(self._exists, user_id)

    async def delete(self, user_id: str) -> None:
        await run_in_threadpool(self._delete, user_id)


class InMemoryUserRepository:
    """Dictionary-backed user repository.

    Keeps insertion order and stores copies, so callers never alias the
    stored entities.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[str, User] = {}
        for user in users or []:
            self._users[user.id] = user.model_copy(deep=True)

    async def get_by_id(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy(deep=True) if user is not None else None

    async def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    async def get_all(self) -> list[User]:
        return [user.model_copy(deep=True) for user in self._users.values()]

    async def add(self, user: User) -> User:
        stored = user.model_copy(deep=True)
        self._users[stored.id] = stored
        return stored.model_copy(deep=True)

    async def update(self, user: User) -> User:
        if user.id not in self._users:
            raise LookupError(f"User {user.id} does not exist")
        stored = user.model_copy(update={"updated_at": utcnow()}, deep=True)
        self._users[stored.id] = stored
        return stored.model_copy(deep=True)

    async def exists(self, user_id: str) -> bool:
        return user_id in self._users

    async def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._users)
