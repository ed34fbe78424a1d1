"""FastAPI dependency injection helpers."""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.infrastructure.database import async_session_factory
from src.infrastructure.repositories import (
    HospitalRepository,
    UserLocationRepository,
    UserRepository,
)
from src.services.hospital_finder import HospitalFinder

# Upper bound of the INTEGER primary key on ``users``
MAX_USER_ID = 2**31 - 1


async def get_db() -> AsyncSession:  # type: ignore[misc]
    """Yield an async DB session; commit on success, rollback on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_current_user_id(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> Optional[int]:
    """Resolve the caller from the user-id header; ``None`` if anonymous.

    Unknown or malformed ids are treated as anonymous.
    """
    raw = (request.headers.get(settings.user_id_header) or "").strip()
    if not raw.isascii() or not raw.isdigit():
        return None
    user_id = int(raw)
    if user_id > MAX_USER_ID:
        return None
    user = await UserRepository(db).get_by_id(user_id)
    return user.id if user else None


async def get_finder(db: AsyncSession = Depends(get_db)) -> HospitalFinder:
    return HospitalFinder(HospitalRepository(db), UserLocationRepository(db))
