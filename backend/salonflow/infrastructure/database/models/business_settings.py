"""SQLAlchemy ORM model for the per-owner business settings row."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from salonflow.infrastructure.database.base import Base


class BusinessSettingsModel(Base):
    """ORM model — maps to the 'business_settings' table (one row per owner)."""

    __tablename__ = "business_settings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        "user_id", String(255), nullable=False, unique=True
    )
    work_start_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    work_end_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    lunch_start_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    lunch_end_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<BusinessSettingsModel(id={self.id}, owner='{self.owner_id}')>"
