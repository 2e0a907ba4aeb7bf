"""Domain value objects for dashboard aggregates."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DashboardStats:
    """Today's figures for one owner, amounts in cents."""

    daily_earnings: int
    attended_appointments: int
    average_ticket: int


@dataclass(frozen=True)
class EarningsPoint:
    """Income summed for a single day."""

    date: date
    amount: int
