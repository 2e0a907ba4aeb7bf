"""Pydantic DTOs for dashboard aggregates."""

import datetime

from .common import CamelModel


class DashboardStatsResponse(CamelModel):
    """Today's KPIs, amounts in cents."""

    daily_earnings: int
    attended_appointments: int
    average_ticket: int


class EarningsPointResponse(CamelModel):
    """One bar of the weekly income chart."""

    date: datetime.date
    amount: int
