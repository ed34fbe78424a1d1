"""
Domain entities.

- ``Hospital`` enforces the WGS84 coordinate ranges on construction.
- ``HospitalMatch`` is the per-query result item: a hospital plus an
  optional distance from the caller's reference point.  Never persisted.
- ``UserLocation`` is the single saved position of one user.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from .enums import WEEKDAYS


class AuthorizationRequired(Exception):
    """Raised when an operation needs an authenticated caller and has none."""

    def __init__(self, message: str = "User must be authenticated"):
        super().__init__(message)
        self.message = message


class InvalidCoordinates(ValueError):
    """Raised when a latitude / longitude pair is outside WGS84 ranges."""


def validate_coordinates(latitude: float, longitude: float) -> None:
    if not -90.0 <= latitude <= 90.0:
        raise InvalidCoordinates(f"Latitude {latitude} outside [-90, 90]")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidCoordinates(f"Longitude {longitude} outside [-180, 180]")


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class OperatingHours:
    monday: str
    tuesday: str
    wednesday: str
    thursday: str
    friday: str
    saturday: str
    sunday: str

    @classmethod
    def every_day(cls, schedule: str) -> OperatingHours:
        return cls(**{day: schedule for day in WEEKDAYS})

    @classmethod
    def from_dict(cls, data: dict) -> OperatingHours:
        return cls(**{day: data[day] for day in WEEKDAYS})

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Hospital:
    name: str
    address: str
    latitude: float
    longitude: float
    type: str
    is_emergency: bool
    operating_hours: OperatingHours
    services: list[str] = field(default_factory=list)
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    rating: Optional[float] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        validate_coordinates(self.latitude, self.longitude)


@dataclass(frozen=True)
class HospitalMatch:
    hospital: Hospital
    distance: Optional[float] = None  # km


@dataclass
class UserLocation:
    user_id: int
    latitude: float
    longitude: float
    address: Optional[str] = None
    last_updated: Optional[datetime] = None
    id: Optional[int] = None
