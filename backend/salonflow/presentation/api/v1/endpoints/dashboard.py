"""Dashboard endpoints — read-only aggregates over the caller's records."""

from fastapi import APIRouter, Depends

from salonflow.application.schemas import DashboardStatsResponse, EarningsPointResponse
from salonflow.application.services import DashboardService
from salonflow.domain.entities import Principal
from salonflow.infrastructure.dependencies import get_current_principal, get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse, response_model_by_alias=True)
async def get_dashboard_stats(
    principal: Principal = Depends(get_current_principal),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    """Today's income, attended appointments and average ticket."""
    stats = await service.get_stats(principal)
    return DashboardStatsResponse.model_validate(stats, from_attributes=True)


@router.get(
    "/chart",
    response_model=list[EarningsPointResponse],
    response_model_by_alias=True,
)
async def get_weekly_chart(
    principal: Principal = Depends(get_current_principal),
    service: DashboardService = Depends(get_dashboard_service),
) -> list[EarningsPointResponse]:
    """Income per day for the last seven days, oldest first."""
    points = await service.get_weekly_chart(principal)
    return [EarningsPointResponse.model_validate(p, from_attributes=True) for p in points]
