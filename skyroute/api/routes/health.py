"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the path map cannot be supplied (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from skyroute.core.errors import SkyRouteError
from skyroute.infrastructure.graph_provider import (
    StaticGraphProvider, get_graph_provider,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "skyroute-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    provider: StaticGraphProvider = Depends(get_graph_provider),
):
    """Readiness probe — includes path map availability."""
    try:
        graph = await provider.get_paths()
    except SkyRouteError as e:
        logger.warning(
            f"Readiness check failed: {e.message}",
            extra={"error_code": e.code},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": e.code.lower(),
            },
        )
    return {
        "status": "ready",
        "checks": {"path_map": "healthy", "points": len(graph)},
    }
