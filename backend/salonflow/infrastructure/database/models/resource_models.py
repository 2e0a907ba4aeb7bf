"""SQLAlchemy ORM models for the six tenant-owned resource tables.

Referenced ids (client, professional, service, appointment) are plain
indexed columns: a dangling reference is tolerated the same way the
``ON DELETE SET NULL`` behaviour of the original schema tolerated it.
"""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from salonflow.infrastructure.database.base import Base, OwnedRecordMixin


class ClientModel(OwnedRecordMixin, Base):
    """ORM model — maps to the 'clients' table."""

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    how_found: Mapped[str | None] = mapped_column(String(255), nullable=True)


class ProfessionalModel(OwnedRecordMixin, Base):
    """ORM model — maps to the 'professionals' table."""

    __tablename__ = "professionals"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    salary: Mapped[int | None] = mapped_column(Integer, nullable=True)  # cents
    commission_rate: Mapped[float | None] = mapped_column(
        Numeric(5, 2, asdecimal=False), nullable=True
    )
    work_start_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    work_end_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    lunch_start_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    lunch_end_time: Mapped[str | None] = mapped_column(String(5), nullable=True)


class ServiceModel(OwnedRecordMixin, Base):
    """ORM model — maps to the 'services' table."""

    __tablename__ = "services"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # cents
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutes
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)


class ProductModel(OwnedRecordMixin, Base):
    """ORM model — maps to the 'products' table."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # cents
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)


class AppointmentModel(OwnedRecordMixin, Base):
    """ORM model — maps to the 'appointments' table."""

    __tablename__ = "appointments"

    client_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    professional_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    service_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # cents
    appointment_date: Mapped[datetime] = mapped_column(
        "start_time", DateTime(timezone=True), nullable=False
    )
    end_date: Mapped[datetime] = mapped_column(
        "end_time", DateTime(timezone=True), nullable=False
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    attended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class FinancialEntryModel(OwnedRecordMixin, Base):
    """ORM model — maps to the 'financial_entries' table."""

    __tablename__ = "financial_entries"

    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)  # cents
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    entry_type: Mapped[str] = mapped_column(String(10), nullable=False)
    entry_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    appointment_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
