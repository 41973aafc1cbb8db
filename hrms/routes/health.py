"""
HRMS Backend - Health Check Route
==================================

What:  Health check endpoint for monitoring and container health checks.
How:   Pings MongoDB and reports the result with version and uptime.
Who:   Called by Docker health checks, load balancers and monitoring systems.

Status levels:
    - healthy:   Database answered the ping (HTTP 200)
    - unhealthy: Database unreachable or not initialized (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from hrms import __version__
from hrms.schemas.employee import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    """
    Check that the service can reach its database.

    The handle is read directly from app.state (not via get_mongo) so an
    uninitialized handle reports "unhealthy" instead of raising.
    """
    mongo = getattr(request.app.state, "mongo", None)

    db_status = "disconnected"
    if mongo is not None and await mongo.ping():
        db_status = "connected"
    else:
        logger.warning("Health check: database unreachable")

    overall = "healthy" if db_status == "connected" else "unhealthy"
    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=body.model_dump(),
    )
