"""
Hospital Finder Service
=======================

Orchestrates the repositories and the domain ranking pipeline for the
operations exposed over HTTP:

* ``get_nearby_hospitals``  -- radius query around a point
* ``search_hospitals``      -- name search, optionally ranked by distance
* ``get_hospital_by_id``
* ``save_user_location`` / ``get_user_location`` -- per-user upsert / read
* ``seed_hospitals``        -- load the sample directory once

Authentication is resolved by the caller and passed in as ``user_id``
(``None`` when the request is anonymous).
"""

from __future__ import annotations

import logging
from typing import Optional

from src.config import settings
from src.domain.entities import (
    AuthorizationRequired,
    Hospital,
    HospitalMatch,
    UserLocation,
)
from src.domain.sample_data import sample_hospitals
from src.domain.search import find_nearby, rank_by_distance
from src.infrastructure.repositories import (
    HospitalRepository,
    UserLocationRepository,
)

logger = logging.getLogger(__name__)


class HospitalFinder:
    def __init__(
        self,
        hospitals: HospitalRepository,
        locations: UserLocationRepository,
        default_radius_km: float | None = None,
    ):
        self.hospitals = hospitals
        self.locations = locations
        self.default_radius_km = (
            settings.default_radius_km
            if default_radius_km is None
            else default_radius_km
        )

    # ── Queries ───────────────────────────────────────────────────────

    async def get_nearby_hospitals(
        self,
        latitude: float,
        longitude: float,
        radius_km: float | None = None,
        hospital_type: str | None = None,
        emergency_only: bool = False,
    ) -> list[HospitalMatch]:
        radius = self.default_radius_km if radius_km is None else radius_km
        candidates = await self.hospitals.list_all()
        matches = find_nearby(
            candidates,
            latitude,
            longitude,
            radius_km=radius,
            hospital_type=hospital_type,
            emergency_only=emergency_only,
        )
        logger.debug(
            "Nearby (%.5f, %.5f) r=%.1fkm: %d of %d hospitals",
            latitude, longitude, radius, len(matches), len(candidates),
        )
        return matches

    async def search_hospitals(
        self,
        term: str,
        latitude: float | None = None,
        longitude: float | None = None,
        hospital_type: str | None = None,
        emergency_only: bool = False,
    ) -> list[HospitalMatch]:
        found = await self.hospitals.search_by_name(
            term,
            hospital_type=hospital_type,
            is_emergency=True if emergency_only else None,
        )
        logger.debug("Search %r: %d hospitals", term, len(found))
        if latitude is not None and longitude is not None:
            return rank_by_distance(found, latitude, longitude)
        return [HospitalMatch(hospital=h) for h in found]

    async def get_hospital_by_id(self, hospital_id: int) -> Optional[Hospital]:
        return await self.hospitals.get_by_id(hospital_id)

    # ── User location ─────────────────────────────────────────────────

    async def save_user_location(
        self,
        user_id: int | None,
        latitude: float,
        longitude: float,
        address: str | None = None,
    ) -> int:
        if user_id is None:
            raise AuthorizationRequired()
        location_id = await self.locations.upsert(
            user_id=user_id,
            latitude=latitude,
            longitude=longitude,
            address=address,
        )
        logger.info("Saved location %d for user %d", location_id, user_id)
        return location_id

    async def get_user_location(
        self, user_id: int | None
    ) -> Optional[UserLocation]:
        if user_id is None:
            return None
        return await self.locations.get_by_user(user_id)

    # ── Seeding ───────────────────────────────────────────────────────

    async def seed_hospitals(self, user_id: int | None) -> str:
        if user_id is None:
            raise AuthorizationRequired()
        if await self.hospitals.exists_any():
            return "Hospitals already seeded"

        hospitals = sample_hospitals()
        for hospital in hospitals:
            await self.hospitals.insert(hospital)
        logger.info("User %d seeded %d hospitals", user_id, len(hospitals))
        return f"Seeded {len(hospitals)} hospitals"
