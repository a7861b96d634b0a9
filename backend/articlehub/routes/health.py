"""
ArticleHub Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings the active article store and reports aggregate status.
Who:   Called by Docker health checks, load balancers and monitoring.

Status levels:
    - healthy:   store reachable
    - unhealthy: store unreachable or not initialized
"""

import logging
import time

from fastapi import APIRouter, Request

from articlehub import __version__
from articlehub.schemas.article import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Check the service and its store.

    Never raises: a failing ping is reported as `unhealthy` with HTTP 200,
    leaving the decision to the probe.
    """
    store = getattr(request.app.state, "store", None)
    backend = getattr(store, "name", "none")
    db_status = "disconnected"
    overall = "unhealthy"

    if store is not None:
        try:
            if await store.ping():
                db_status = "connected"
                overall = "healthy"
        except Exception as e:
            logger.warning("Health check: store unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        store_backend=backend,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
