"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - No downstream checks: the archive service is optional at startup
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "server": request.app.state.settings.server_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
