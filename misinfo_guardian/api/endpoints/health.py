"""Health and status endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...domain.services.guardian_service import GuardianService
from ...infrastructure.dependencies import get_guardian_service

router = APIRouter(tags=["health"])

VERSION = "0.1.0"


@router.get("/health")
async def health_check(service: GuardianService = Depends(get_guardian_service)) -> Dict[str, Any]:
    """Check service health.

    Returns:
        Status, version and whether remote fact checking is enabled
    """
    status = service.get_status()
    return {
        "status": "healthy",
        "version": VERSION,
        "remote_fact_check": status["remote_fact_check"]["enabled"],
    }


@router.get("/status")
async def service_status(service: GuardianService = Depends(get_guardian_service)) -> Dict[str, Any]:
    """Describe the active pipeline configuration."""
    return service.get_status()
