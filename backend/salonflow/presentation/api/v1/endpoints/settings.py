"""Business settings endpoints — the caller's opening hours (one row per owner)."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from salonflow.application.schemas import BusinessSettingsResponse
from salonflow.application.services import BusinessSettingsService
from salonflow.application.validation import ValidationFailure
from salonflow.domain.entities import Principal
from salonflow.infrastructure.dependencies import (
    get_business_settings_service,
    get_current_principal,
)
from salonflow.presentation.envelope import success, validation_failed

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=BusinessSettingsResponse | None)
async def get_business_settings(
    principal: Principal = Depends(get_current_principal),
    service: BusinessSettingsService = Depends(get_business_settings_service),
) -> JSONResponse:
    """Return the caller's settings, or null when none were saved yet."""
    settings = await service.get_settings(principal)
    if settings is None:
        return success(None)
    return success(BusinessSettingsResponse.model_validate(settings, from_attributes=True))


@router.put("", response_model=BusinessSettingsResponse)
async def save_business_settings(
    payload: Any = Body(...),
    principal: Principal = Depends(get_current_principal),
    service: BusinessSettingsService = Depends(get_business_settings_service),
) -> JSONResponse:
    """Create or replace the caller's settings."""
    result = await service.save_settings(principal, payload)
    if isinstance(result, ValidationFailure):
        return validation_failed(result.errors)
    return success(BusinessSettingsResponse.model_validate(result, from_attributes=True))
