"""Contract tests shared by every UserRepository implementation.

Each test runs against the SQL repository (in-memory SQLite) and the
in-memory repository.
"""

import asyncio
import contextlib
import time
from datetime import UTC, datetime

import pytest
from sqlalchemy import event
from sqlmodel import Session, select

from src.users_api.entities.user import (
    InMemoryUserRepository,
    SqlUserRepository,
    User,
    UserRepository,
    UserTable,
)


@pytest.fixture(params=["sql", "memory"])
def repository(request, session: Session) -> UserRepository:
    if request.param == "sql":
        return SqlUserRepository(session)
    return InMemoryUserRepository()


class TestUserRepositoryContract:

    def test_implements_protocol(self, repository: UserRepository):
        assert isinstance(repository, UserRepository)

    @pytest.mark.asyncio
    async def test_add_and_get_by_id(self, repository: UserRepository, make_user):
        user = make_user()

        added = await repository.add(user)
        fetched = await repository.get_by_id(user.id)

        assert added == user
        assert fetched == user
        assert isinstance(fetched, User)

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, repository: UserRepository):
        assert await repository.get_by_id("does-not-exist") is None

    @pytest.mark.asyncio
    async def test_get_by_email(self, repository: UserRepository, make_user):
        user = await repository.add(make_user(email="findme@example.com"))
        await repository.add(make_user(email="other@example.com"))

        found = await repository.get_by_email("findme@example.com")

        assert found is not None
        assert found.id == user.id
        assert await repository.get_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_get_all_keeps_insertion_order(self, repository: UserRepository, make_user):
        first = await repository.add(make_user(first_name="First", email="first@example.com"))
        second = await repository.add(make_user(first_name="Second", email="second@example.com"))
        third = await repository.add(make_user(first_name="Third", email="third@example.com"))

        users = await repository.get_all()

        assert [u.id for u in users] == [first.id, second.id, third.id]

    @pytest.mark.asyncio
    async def test_get_all_empty(self, repository: UserRepository):
        assert await repository.get_all() == []

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, repository: UserRepository, make_user):
        user = await repository.add(make_user())
        user.first_name = "Changed"
        user.email = "changed@example.com"

        updated = await repository.update(user)
        fetched = await repository.get_by_id(user.id)

        assert updated.first_name == "Changed"
        assert fetched is not None
        assert fetched.first_name == "Changed"
        assert fetched.email == "changed@example.com"
        assert fetched.id == user.id

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, repository: UserRepository, make_user):
        with pytest.raises(LookupError):
            await repository.update(make_user())

    @pytest.mark.asyncio
    async def test_exists_and_delete(self, repository: UserRepository, make_user):
        user = await repository.add(make_user())

        assert await repository.exists(user.id) is True
        await repository.delete(user.id)
        assert await repository.exists(user.id) is False
        assert await repository.get_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, repository: UserRepository):
        await repository.delete("does-not-exist")

    @pytest.mark.asyncio
    async def test_returned_entities_do_not_alias_storage(self, repository: UserRepository, make_user):
        user = await repository.add(make_user())

        fetched = await repository.get_by_id(user.id)
        assert fetched is not None
        fetched.first_name = "Mutated"

        again = await repository.get_by_id(user.id)
        assert again is not None
        assert again.first_name == "Matti"


class TestSqlUserRepository:
    """Behaviour specific to the SQL implementation."""

    @pytest.mark.asyncio
    async def test_add_commits_row(self, session: Session, make_user):
        repository = SqlUserRepository(session)
        user = await repository.add(make_user())

        rows = session.exec(select(UserTable)).all()

        assert [row.id for row in rows] == [user.id]

    @pytest.mark.asyncio
    async def test_failed_commit_rolls_back(self, session: Session, make_user):
        repository = SqlUserRepository(session)
        user = await repository.add(make_user())

        # Same primary key again violates the table constraint
        with pytest.raises(Exception):
            await repository.add(make_user(id=user.id, email="dup@example.com"))

        assert await repository.get_all() == [user]

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at(self, session: Session, make_user):
        repository = SqlUserRepository(session)
        user = await repository.add(make_user())

        updated = await repository.update(user)

        assert updated.updated_at.replace(tzinfo=None) >= user.updated_at.replace(tzinfo=None)

    @pytest.mark.asyncio
    async def test_get_all_breaks_created_at_ties_by_id(self, session: Session, make_user):
        repository = SqlUserRepository(session)
        created_at = datetime(2024, 1, 1, tzinfo=UTC)
        await repository.add(make_user(id="b", email="b@example.com", created_at=created_at))
        await repository.add(make_user(id="a", email="a@example.com", created_at=created_at))

        users = await repository.get_all()

        assert [u.id for u in users] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_queries_do_not_block_event_loop(self, session: Session, make_user):
        """Database work runs off the loop, so other tasks keep running."""
        repository = SqlUserRepository(session)
        await repository.add(make_user())
        engine = session.get_bind()

        def slow_query(*args):
            time.sleep(0.3)

        ticks = 0

        async def ticker():
            nonlocal ticks
            while True:
                await asyncio.sleep(0.01)
                ticks += 1

        event.listen(engine, "before_cursor_execute", slow_query)
        task = asyncio.create_task(ticker())
        try:
            users = await repository.get_all()
        finally:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
            event.remove(engine, "before_cursor_execute", slow_query)

        assert len(users) == 1
        assert ticks >= 10
