"""Liveness probe. Public: no principal and no database session."""

from fastapi import APIRouter

from salonflow.application.schemas import HealthResponse
from salonflow.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(version=settings.app_version, environment=settings.app_env)
