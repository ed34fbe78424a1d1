"""
Seed script -- populates the database with sample data for reviewers.

Run after migrations:
    python seed.py

Creates, each only when its table is empty:
  - 3 sample users (send their id in the ``X-User-Id`` header)
  - 5 sample hospitals around New York City
"""

import asyncio

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.sample_data import sample_hospitals
from src.infrastructure.database import async_session_factory, engine
from src.infrastructure.models import UserModel
from src.infrastructure.repositories import HospitalRepository


USERS = [
    {"name": "Alex Morgan", "email": "alex@example.com"},
    {"name": "Sam Rivera", "email": "sam@example.com"},
    {"name": "Jordan Lee", "email": "jordan@example.com"},
]


async def seed_session(
    session: AsyncSession, hospital_repo: HospitalRepository
) -> None:
    """Add whatever sample data is missing; the caller commits."""
    # ── Users ─────────────────────────────────────────────────────────
    result = await session.execute(select(func.count()).select_from(UserModel))
    if result.scalar() > 0:
        print("  Users already present, skipping")
    else:
        for u in USERS:
            session.add(UserModel(name=u["name"], email=u["email"]))
        await session.flush()
        print(f"  Created {len(USERS)} users")

    # ── Hospitals ─────────────────────────────────────────────────────
    if await hospital_repo.exists_any():
        print("  Hospitals already present, skipping")
    else:
        hospitals = sample_hospitals()
        for h in hospitals:
            await hospital_repo.insert(h)
        print(f"  Created {len(hospitals)} hospitals")


async def seed():
    async with async_session_factory() as session:
        await seed_session(session, HospitalRepository(session))
        await session.commit()
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
