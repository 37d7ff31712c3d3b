"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - The in-memory backend has no database and is always ready
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "qanda-api",
        "version": "0.1.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe, including database connectivity."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        return {"status": "ready", "checks": {"database": "in_memory"}}
    if not await db_manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
