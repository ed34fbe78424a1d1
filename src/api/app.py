"""
FastAPI application factory.

* Registers routes for hospitals, user locations and admin.
* Maps domain errors to HTTP responses.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, hospitals, locations
from src.config import settings
from src.domain.entities import AuthorizationRequired, InvalidCoordinates

logging.basicConfig(level=settings.log_level)


async def _authorization_required_handler(
    request: Request, exc: AuthorizationRequired
) -> JSONResponse:
    return JSONResponse(status_code=401, content={"detail": exc.message})


async def _invalid_coordinates_handler(
    request: Request, exc: InvalidCoordinates
) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Hospital Finder API",
        description=(
            "Finds hospitals near a location or by name, filtered by type "
            "and emergency capability, and keeps each user's last saved "
            "location."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors
    app.add_exception_handler(AuthorizationRequired, _authorization_required_handler)
    app.add_exception_handler(InvalidCoordinates, _invalid_coordinates_handler)

    # Routers
    app.include_router(hospitals.router, prefix="/api/v1")
    app.include_router(locations.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
