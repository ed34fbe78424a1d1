"""
User location endpoints
=======================

PUT /api/v1/me/location -- save (upsert) the caller's location
GET /api/v1/me/location -- the caller's saved location, or ``null``
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_current_user_id, get_finder
from src.api.middleware import limiter
from src.api.schemas import (
    ErrorResponse,
    SavedLocationResponse,
    UserLocationRequest,
    UserLocationResponse,
)
from src.config import settings
from src.services.hospital_finder import HospitalFinder

router = APIRouter(prefix="/me", tags=["user location"])


@router.put(
    "/location",
    response_model=SavedLocationResponse,
    summary="Save the caller's location",
    description=(
        "Creates the caller's location on first save and overwrites it "
        "afterwards. Exactly one location is kept per user."
    ),
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not authenticated."}
    },
)
@limiter.limit(settings.rate_limit)
async def save_location(
    request: Request,
    body: UserLocationRequest,
    user_id: Optional[int] = Depends(get_current_user_id),
    finder: HospitalFinder = Depends(get_finder),
):
    location_id = await finder.save_user_location(
        user_id, body.latitude, body.longitude, body.address
    )
    return SavedLocationResponse(id=location_id)


@router.get(
    "/location",
    response_model=Optional[UserLocationResponse],
    summary="Get the caller's saved location",
)
@limiter.limit(settings.rate_limit)
async def get_location(
    request: Request,
    user_id: Optional[int] = Depends(get_current_user_id),
    finder: HospitalFinder = Depends(get_finder),
):
    location = await finder.get_user_location(user_id)
    return UserLocationResponse.model_validate(location) if location else None
