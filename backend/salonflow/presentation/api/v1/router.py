"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from salonflow.application.services import RESOURCE_CONFIGS
from salonflow.presentation.api.v1.endpoints.health import router as health_router
from salonflow.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from salonflow.presentation.api.v1.endpoints.settings import router as settings_router
from salonflow.presentation.api.v1.endpoints.resources import build_resource_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(dashboard_router)
router.include_router(settings_router)
for _config in RESOURCE_CONFIGS.values():
    router.include_router(build_resource_router(_config))
