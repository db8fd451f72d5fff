"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if Horizon is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "payment-gateway"}


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: Horizon must answer."""
    horizon = getattr(request.app.state, "horizon", None)
    horizon_ok = await horizon.health_check() if horizon else False
    if not horizon_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "horizon_unavailable"},
        )
    return {"status": "ready", "checks": {"horizon": "healthy"}}
