"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the registry is not loaded or the
      database is unreachable while persistence is enabled (readiness)
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

import tokenregistry.infrastructure.database as db_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "token-registry-api"}


@router.get("/ready")
async def readiness_check(request: Request):
    if getattr(request.app.state, "registry_service", None) is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "registry_not_loaded"},
        )
    checks = {"registry": "loaded"}
    manager = db_module.db_manager
    if manager is not None:
        if not await manager.health_check():
            logger.warning("Readiness check failed: database unavailable")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "reason": "database_unavailable"},
            )
        checks["database"] = "healthy"
    return {"status": "ready", "checks": checks}
