"""Tests for the standalone ``seed.py`` script."""

import pytest
from sqlalchemy import func, select

from seed import USERS, seed_session
from src.infrastructure.models import UserModel
from tests.support import SQLiteHospitalRepository


async def _users(session) -> int:
    result = await session.execute(select(func.count()).select_from(UserModel))
    return result.scalar() or 0


class TestSeedScript:
    @pytest.mark.asyncio
    async def test_empty_database_gets_users_and_hospitals(self, db_session):
        repo = SQLiteHospitalRepository(db_session)
        await seed_session(db_session, repo)

        assert await _users(db_session) == len(USERS)
        assert len(await repo.list_all()) == 5

    @pytest.mark.asyncio
    async def test_hospitals_seeded_when_users_already_exist(
        self, db_session, user_id
    ):
        repo = SQLiteHospitalRepository(db_session)
        await seed_session(db_session, repo)

        assert await _users(db_session) == 1
        assert len(await repo.list_all()) == 5

    @pytest.mark.asyncio
    async def test_second_run_adds_nothing(self, db_session):
        repo = SQLiteHospitalRepository(db_session)
        await seed_session(db_session, repo)
        await seed_session(db_session, repo)

        assert await _users(db_session) == len(USERS)
        assert len(await repo.list_all()) == 5
