"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.  Rows are converted to domain entities on
the way out so callers never touch ORM objects.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from geoalchemy2.elements import WKTElement
from sqlalchemy import case, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from .models import HospitalModel, UserLocationModel, UserModel
from src.domain.entities import Hospital, OperatingHours, UserLocation

# Dialects with a native ``INSERT ... ON CONFLICT DO UPDATE``
_UPSERT_INSERTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


class HospitalRepository:
    model = HospitalModel

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _point(latitude: float, longitude: float):
        """Geometry value for the ``location`` column (lng/lat order)."""
        return WKTElement(f"POINT({longitude} {latitude})", srid=4326)

    @staticmethod
    def _to_entity(row) -> Hospital:
        return Hospital(
            id=row.id,
            name=row.name,
            address=row.address,
            phone=row.phone,
            email=row.email,
            website=row.website,
            latitude=row.latitude,
            longitude=row.longitude,
            type=row.type,
            services=list(row.services or []),
            rating=row.rating,
            is_emergency=bool(row.is_emergency),
            operating_hours=OperatingHours.from_dict(row.operating_hours),
        )

    async def insert(self, hospital: Hospital) -> int:
        row = self.model(
            name=hospital.name,
            address=hospital.address,
            phone=hospital.phone,
            email=hospital.email,
            website=hospital.website,
            latitude=hospital.latitude,
            longitude=hospital.longitude,
            location=self._point(hospital.latitude, hospital.longitude),
            type=hospital.type,
            services=list(hospital.services),
            rating=hospital.rating,
            is_emergency=hospital.is_emergency,
            operating_hours=hospital.operating_hours.to_dict(),
        )
        self.session.add(row)
        await self.session.flush()
        return row.id

    async def get_by_id(self, hospital_id: int) -> Optional[Hospital]:
        row = await self.session.get(self.model, hospital_id)
        return self._to_entity(row) if row else None

    async def list_all(self) -> list[Hospital]:
        """Full collection scan in id (insertion) order."""
        result = await self.session.execute(
            select(self.model).order_by(self.model.id)
        )
        return [self._to_entity(r) for r in result.scalars().all()]

    async def exists_any(self) -> bool:
        result = await self.session.execute(
            select(self.model.id).limit(1)
        )
        return result.first() is not None

    async def search_by_name(
        self,
        term: str,
        *,
        hospital_type: str | None = None,
        is_emergency: bool | None = None,
    ) -> list[Hospital]:
        """Case-insensitive name match; every token of *term* must occur.

        Names starting with the first token rank ahead of the rest; ties
        keep insertion order.
        """
        tokens = term.split()
        if not tokens:
            return []

        name = self.model.name
        query = select(self.model)
        for token in tokens:
            query = query.where(name.icontains(token, autoescape=True))
        if hospital_type:
            query = query.where(self.model.type == hospital_type)
        if is_emergency is not None:
            query = query.where(self.model.is_emergency.is_(is_emergency))

        prefix_first = case(
            (name.istartswith(tokens[0], autoescape=True), 0),
            else_=1,
        )
        result = await self.session.execute(
            query.order_by(prefix_first, self.model.id)
        )
        return [self._to_entity(r) for r in result.scalars().all()]


class UserLocationRepository:
    model = UserLocationModel

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(row) -> UserLocation:
        return UserLocation(
            id=row.id,
            user_id=row.user_id,
            latitude=row.latitude,
            longitude=row.longitude,
            address=row.address,
            last_updated=row.last_updated,
        )

    async def get_by_user(self, user_id: int) -> Optional[UserLocation]:
        result = await self.session.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return self._to_entity(row) if row else None

    async def upsert(
        self,
        *,
        user_id: int,
        latitude: float,
        longitude: float,
        address: str | None = None,
    ) -> int:
        """Insert or update the location keyed on ``user_id``.

        Atomic on PostgreSQL / SQLite via ``ON CONFLICT``; other dialects
        fall back to lookup-then-patch, which can race.
        """
        values = {
            "user_id": user_id,
            "latitude": latitude,
            "longitude": longitude,
            "address": address,
            "last_updated": datetime.now(timezone.utc),
        }
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            return await self._lookup_then_patch(values)

        stmt = insert(self.model).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={
                col: stmt.excluded[col]
                for col in ("latitude", "longitude", "address", "last_updated")
            },
        ).returning(self.model.id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _lookup_then_patch(self, values: dict) -> int:
        result = await self.session.execute(
            select(self.model).where(self.model.user_id == values["user_id"])
        )
        row = result.scalar_one_or_none()
        if row is None:
            row = self.model(**values)
            self.session.add(row)
        else:
            for key, value in values.items():
                setattr(row, key, value)
        await self.session.flush()
        return row.id


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[UserModel]:
        return await self.session.get(UserModel, user_id)
