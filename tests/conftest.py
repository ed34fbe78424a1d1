"""
Shared test fixtures.

Database plumbing lives in ``tests.support``; this module only wires it
into pytest fixtures.
"""

from typing import AsyncGenerator

import pytest_asyncio
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.sample_data import sample_hospitals
from src.infrastructure.models import UserModel
from src.services.hospital_finder import HospitalFinder
from tests.support import (
    TestSessionFactory,
    create_tables,
    drop_tables,
    make_finder,
)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield a session, then drop everything."""
    await create_tables()

    async with TestSessionFactory() as session:
        yield session

    await drop_tables()


@pytest_asyncio.fixture
async def user_id(db_session: AsyncSession) -> int:
    user = UserModel(name="Test User", email="test@example.com")
    db_session.add(user)
    await db_session.flush()
    return user.id


@pytest_asyncio.fixture
async def finder(db_session: AsyncSession) -> HospitalFinder:
    return make_finder(db_session)


@pytest_asyncio.fixture
async def seeded_finder(finder: HospitalFinder) -> HospitalFinder:
    """Finder over the five sample hospitals (ids 1..5 in listed order)."""
    for hospital in sample_hospitals():
        await finder.hospitals.insert(hospital)
    return finder


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by SQLite; one user (id 1), no hospitals."""
    await create_tables()

    async with TestSessionFactory() as session:
        session.add(UserModel(name="Test User", email="test@example.com"))
        await session.commit()

    # DB session dependency
    async def _test_db():
        async with TestSessionFactory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    from src.api.app import create_app
    from src.api.dependencies import get_db, get_finder
    from src.api.middleware import limiter

    async def _test_finder(db: AsyncSession = Depends(get_db)):
        return make_finder(db)

    app = create_app()
    app.dependency_overrides[get_db] = _test_db
    app.dependency_overrides[get_finder] = _test_finder
    limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await drop_tables()
