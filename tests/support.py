"""
Test support: SQLite engine, mirror models and factories.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL.  The PostGIS ``location`` column on hospitals is
mocked by a mirror model with a plain String column; users and user
locations use the production models unchanged.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    Integer,
    String,
    func,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from src.domain.entities import Hospital, OperatingHours
from src.infrastructure.database import Base
from src.infrastructure.models import (
    UserLocationModel,
    UserModel,
)
from src.infrastructure.repositories import (
    HospitalRepository,
    UserLocationRepository,
)
from src.services.hospital_finder import HospitalFinder


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
TestSessionFactory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)

# Production tables without PostGIS columns
PLAIN_TABLES = [UserModel.__table__, UserLocationModel.__table__]


class TestBase(DeclarativeBase):
    pass


# Mirror of ``HospitalModel`` without the PostGIS Geometry column
# (SQLite doesn't support it).

class TestHospitalModel(TestBase):
    __tablename__ = "hospitals"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    address = Column(String(255), nullable=False)
    phone = Column(String(40), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)
    location = Column(String, nullable=True)  # stub for Geometry
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    type = Column(String(40), nullable=False)
    services = Column(JSON, nullable=False, default=list)
    rating = Column(Float, nullable=True)
    is_emergency = Column(Boolean, default=False, nullable=False)
    operating_hours = Column(JSON, nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class SQLiteHospitalRepository(HospitalRepository):
    """``HospitalRepository`` bound to the SQLite-friendly mirror model."""

    model = TestHospitalModel

    @staticmethod
    def _point(latitude, longitude):
        return f"POINT({longitude} {latitude})"


def make_hospital(
    name: str,
    latitude: float,
    longitude: float,
    type: str = "general",
    is_emergency: bool = False,
    id=None,
) -> Hospital:
    return Hospital(
        id=id,
        name=name,
        address=f"{name} address",
        latitude=latitude,
        longitude=longitude,
        type=type,
        is_emergency=is_emergency,
        services=["General Practice"],
        operating_hours=OperatingHours.every_day("24/7"),
    )


def make_finder(session: AsyncSession) -> HospitalFinder:
    return HospitalFinder(
        SQLiteHospitalRepository(session),
        UserLocationRepository(session),
        default_radius_km=10.0,
    )


async def create_tables() -> None:
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=PLAIN_TABLES)
        await conn.run_sync(TestBase.metadata.create_all)


async def drop_tables() -> None:
    async with test_engine.begin() as conn:
        await conn.run_sync(TestBase.metadata.drop_all)
        await conn.run_sync(Base.metadata.drop_all, tables=PLAIN_TABLES)
    await test_engine.dispose()




def name_matches(name: str, term: str) -> bool:
    """Expected outcome of ``search_by_name`` for ASCII names and terms.

    Every whitespace-separated token must occur in *name*, ignoring case.
    """
    tokens = term.lower().split()
    return bool(tokens) and all(token in name.lower() for token in tokens)
