"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the output directory is missing or not writable
"""

import logging
import os

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from srpcalc.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "srp-calculator-api",
        "version": "1.0.0",
    }


@router.get("/ready")
def readiness_check():
    """Readiness probe — output directory must exist and be writable."""
    output_dir = get_settings().output_dir
    if not os.path.isdir(output_dir) or not os.access(output_dir, os.W_OK):
        logger.warning(
            "Output directory not writable", extra={"path": output_dir},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "output_dir_unavailable",
            },
        )
    return {"status": "ready", "checks": {"output_dir": "writable"}}
