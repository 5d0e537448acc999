"""
Item Service — Health Check Route
===================================

What:  Health check endpoint for monitoring and container probes.
How:   The service has no external dependencies, so it is healthy whenever it
       can answer; the response also reports run mode and item count.
Who:   Called by Docker health checks, load balancers, and monitoring systems.
"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from itemservice import __version__
from itemservice.routes.items import get_store
from itemservice.schemas.item import HealthResponse
from itemservice.services.item_store import ItemStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    store: ItemStore = Depends(get_store),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=request.app.state.settings.app_env,
        item_count=store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
