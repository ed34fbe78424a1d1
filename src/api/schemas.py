"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities import HospitalMatch


# ── Requests ──────────────────────────────────────────────────────────


class UserLocationRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: Optional[str] = Field(None, max_length=255)


# ── Responses ─────────────────────────────────────────────────────────


class OperatingHoursResponse(BaseModel):
    monday: str
    tuesday: str
    wednesday: str
    thursday: str
    friday: str
    saturday: str
    sunday: str

    model_config = {"from_attributes": True}


class HospitalResponse(BaseModel):
    id: int
    name: str
    address: str
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    latitude: float
    longitude: float
    type: str
    services: list[str] = []
    rating: Optional[float] = None
    is_emergency: bool
    operating_hours: OperatingHoursResponse
    distance: Optional[float] = Field(
        None, description="Kilometres from the reference point, if one was given."
    )

    model_config = {"from_attributes": True}

    @classmethod
    def from_match(cls, match: HospitalMatch) -> HospitalResponse:
        h = match.hospital
        return cls(
            id=h.id,
            name=h.name,
            address=h.address,
            phone=h.phone,
            email=h.email,
            website=h.website,
            latitude=h.latitude,
            longitude=h.longitude,
            type=h.type,
            services=h.services,
            rating=h.rating,
            is_emergency=h.is_emergency,
            operating_hours=OperatingHoursResponse.model_validate(
                h.operating_hours
            ),
            distance=match.distance,
        )


class UserLocationResponse(BaseModel):
    id: int
    user_id: int
    latitude: float
    longitude: float
    address: Optional[str] = None
    last_updated: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SavedLocationResponse(BaseModel):
    id: int


class SeedResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
