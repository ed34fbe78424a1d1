"""
Hospital Filtering & Ranking Pipeline
=====================================

Radius query ("find nearby")
----------------------------
1. Start from the full hospital collection, in fetch order.
2. **Type filter**      -- exact equality on ``type`` when given.
3. **Emergency filter** -- keep ``is_emergency`` hospitals when requested.
4. Compute the Haversine distance to the reference point.
5. Drop anything farther than ``radius_km`` (the bound is inclusive).
6. Sort ascending by distance.  ``sorted`` is stable, so ties keep
   fetch order.

Text search
-----------
Name matching itself happens in the storage layer.  This module only
re-ranks the matches by distance when the caller supplies a position;
without one the storage relevance order is kept.

Complexity
----------
Let N = hospitals fetched, K = hospitals left after filtering.

* Filtering: O(N)
* Ranking:   O(K log K)
"""

from __future__ import annotations

from typing import Iterable, Optional

from .distance import haversine_km
from .entities import Hospital, HospitalMatch


def matches_filters(
    hospital: Hospital,
    hospital_type: Optional[str] = None,
    emergency_only: bool = False,
) -> bool:
    if hospital_type and hospital.type != hospital_type:
        return False
    if emergency_only and not hospital.is_emergency:
        return False
    return True


def rank_by_distance(
    hospitals: Iterable[Hospital], latitude: float, longitude: float
) -> list[HospitalMatch]:
    """Annotate each hospital with its distance and sort nearest first."""
    matches = [
        HospitalMatch(
            hospital=h,
            distance=haversine_km(latitude, longitude, h.latitude, h.longitude),
        )
        for h in hospitals
    ]
    return sorted(matches, key=lambda m: m.distance)


def find_nearby(
    hospitals: Iterable[Hospital],
    latitude: float,
    longitude: float,
    radius_km: float,
    hospital_type: Optional[str] = None,
    emergency_only: bool = False,
) -> list[HospitalMatch]:
    candidates = [
        h for h in hospitals if matches_filters(h, hospital_type, emergency_only)
    ]
    ranked = rank_by_distance(candidates, latitude, longitude)
    return [m for m in ranked if m.distance <= radius_km]
