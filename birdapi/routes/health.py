"""
BirdAPI: Health Check Route
============================

What:  Health check endpoint for monitoring and container probes.
How:   Asks the active store whether its storage is reachable.

Status levels:
    - healthy:   storage reachable (HTTP 200)
    - unhealthy: storage unreachable (HTTP 503, stop routing traffic)

The in-memory store is always reachable; the SQL store runs SELECT 1.
"""

import logging

from fastapi import APIRouter, Depends, Response

from birdapi import __version__
from birdapi.dependencies import get_store
from birdapi.schemas.bird import HealthResponse
from birdapi.stores import BirdStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Storage unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: BirdStore = Depends(get_store),
) -> HealthResponse:
    reachable = await store.ping()
    if not reachable:
        logger.warning("Health check: %s store unreachable", store.name)
        response.status_code = 503

    return HealthResponse(
        status="healthy" if reachable else "unhealthy",
        version=__version__,
        store=store.name,
        storage="connected" if reachable else "disconnected",
    )
