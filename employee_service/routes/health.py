"""
Employee Service: Health Check and Root Routes
=================================================

What:  GET / (plain-text greeting) and GET /health (database connectivity check).
Who:   Called by container health checks, load balancers and humans.

Status levels:
    - healthy:   MongoDB answered a ping (HTTP 200)
    - unhealthy: MongoDB unreachable or no handle (HTTP 200, flagged in body)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from employee_service import __version__
from employee_service.config import settings
from employee_service.schemas.employee import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root() -> str:
    return settings.greeting


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Pings MongoDB and reports service status and uptime.",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Check the health of the service and its database.

    Runs a `ping` admin command; never raises.
    """
    db_status = "connected"
    overall = "healthy"

    handle = getattr(request.app.state, "database", None)
    if handle is None:
        db_status = "disconnected"
        overall = "unhealthy"
    else:
        try:
            await handle.client.admin.command("ping")
        except Exception as e:
            db_status = "disconnected"
            overall = "unhealthy"
            logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
