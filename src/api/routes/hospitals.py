"""
Hospital endpoints
==================

GET  /api/v1/hospitals/nearby         -- hospitals within a radius, nearest first
GET  /api/v1/hospitals/search         -- name search, optionally ranked by distance
GET  /api/v1/hospitals/{hospital_id}  -- single hospital
POST /api/v1/hospitals/seed           -- load the sample hospitals (auth required)
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.dependencies import get_current_user_id, get_finder
from src.api.middleware import limiter
from src.api.schemas import ErrorResponse, HospitalResponse, SeedResponse
from src.config import settings
from src.domain.entities import HospitalMatch
from src.services.hospital_finder import HospitalFinder

router = APIRouter(prefix="/hospitals", tags=["hospitals"])


@router.get(
    "/nearby",
    response_model=list[HospitalResponse],
    summary="Find hospitals near a point",
    description=(
        "Returns hospitals within ``radius`` km (inclusive, default from "
        "settings) sorted by distance. Optional exact ``type`` filter and "
        "``emergency_only`` flag."
    ),
)
@limiter.limit(settings.rate_limit)
async def get_nearby_hospitals(
    request: Request,
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: Optional[float] = Query(None, ge=0, description="Kilometres"),
    type: Optional[str] = Query(None, max_length=40),
    emergency_only: bool = False,
    finder: HospitalFinder = Depends(get_finder),
):
    matches = await finder.get_nearby_hospitals(
        latitude,
        longitude,
        radius_km=radius,
        hospital_type=type,
        emergency_only=emergency_only,
    )
    return [HospitalResponse.from_match(m) for m in matches]


@router.get(
    "/search",
    response_model=list[HospitalResponse],
    summary="Search hospitals by name",
    description=(
        "Every word of ``q`` must appear in the hospital name "
        "(case-insensitive). When both ``latitude`` and ``longitude`` are "
        "given, results carry a distance and are sorted nearest first."
    ),
)
@limiter.limit(settings.rate_limit)
async def search_hospitals(
    request: Request,
    q: str = Query(..., min_length=1, max_length=200),
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    type: Optional[str] = Query(None, max_length=40),
    emergency_only: bool = False,
    finder: HospitalFinder = Depends(get_finder),
):
    if not q.strip():
        raise HTTPException(status_code=422, detail="q must not be blank")
    if (latitude is None) != (longitude is None):
        raise HTTPException(
            status_code=422,
            detail="latitude and longitude must be given together",
        )
    matches = await finder.search_hospitals(
        q,
        latitude=latitude,
        longitude=longitude,
        hospital_type=type,
        emergency_only=emergency_only,
    )
    return [HospitalResponse.from_match(m) for m in matches]


@router.post(
    "/seed",
    response_model=SeedResponse,
    summary="Seed the sample hospitals",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not authenticated."}
    },
)
@limiter.limit(settings.rate_limit)
async def seed_hospitals(
    request: Request,
    user_id: Optional[int] = Depends(get_current_user_id),
    finder: HospitalFinder = Depends(get_finder),
):
    return SeedResponse(message=await finder.seed_hospitals(user_id))


@router.get(
    "/{hospital_id}",
    response_model=HospitalResponse,
    summary="Get a hospital by id",
)
@limiter.limit(settings.rate_limit)
async def get_hospital(
    request: Request,
    hospital_id: int,
    finder: HospitalFinder = Depends(get_finder),
):
    hospital = await finder.get_hospital_by_id(hospital_id)
    if not hospital:
        raise HTTPException(status_code=404, detail="Hospital not found")
    return HospitalResponse.from_match(HospitalMatch(hospital=hospital))
