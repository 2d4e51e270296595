"""
Health check router.

This router provides the liveness endpoint used by local tooling and
process supervisors.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_settings
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


# =============================================================================
# Health Check Endpoints
# =============================================================================


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    """
    Simple liveness endpoint for the fitness dashboard.

    Reports whether gateway credentials are present; never contacts the
    gateway.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok", "gateway_configured": settings.is_configured}
