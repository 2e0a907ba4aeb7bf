"""Integration tests for the SQLAlchemy store adapter on SQLite."""

from datetime import datetime, timezone

import pytest
from sqlalchemy import text

from salonflow.application.interfaces import SortKey
from salonflow.application.ownership import ResourceQuery, scope_all, scope_point
from salonflow.domain.entities import Principal
from salonflow.infrastructure.database.models import AppointmentModel, ServiceModel
from salonflow.infrastructure.database.repositories import SQLAlchemyResourceStore

U1 = Principal(id="u1")


@pytest.mark.asyncio
async def test_unscoped_query_is_a_programming_error(session_factory):
    async with session_factory() as session:
        store = SQLAlchemyResourceStore(session, ServiceModel, "services")
        with pytest.raises(TypeError):
            await store.list(ResourceQuery())


@pytest.mark.asyncio
async def test_insert_stamps_owner_and_ignores_protected_values(session_factory):
    async with session_factory() as session:
        store = SQLAlchemyResourceStore(session, ServiceModel, "services")
        record = await store.insert(
            scope_all(U1),
            {"name": "Corte", "price": 3500, "duration": 30, "owner_id": "u2", "id": "forced"},
        )

    assert record.owner_id == "u1"
    assert record.id != "forced"
    assert record.fields["name"] == "Corte"
    assert record.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_storage_column_names_are_translated(session_factory):
    start = datetime(2025, 3, 10, 14, 0, tzinfo=timezone.utc)
    async with session_factory() as session:
        store = SQLAlchemyResourceStore(session, AppointmentModel, "appointments")
        record = await store.insert(
            scope_all(U1),
            {
                "client_id": "c1",
                "professional_id": "p1",
                "service_id": "s1",
                "appointment_date": start,
                "end_date": start.replace(minute=30),
                "price": 3500,
                "attended": False,
            },
        )

    async with session_factory() as session:
        row = (
            await session.execute(text("SELECT user_id, start_time FROM appointments"))
        ).one()
        store = SQLAlchemyResourceStore(session, AppointmentModel, "appointments")
        found = await store.find_one(scope_point(record.id, U1))

    assert row.user_id == "u1"
    assert row.start_time is not None
    assert found.fields["appointment_date"] == start
    assert "start_time" not in found.fields


@pytest.mark.asyncio
async def test_unknown_filter_field_is_rejected(session_factory):
    async with session_factory() as session:
        store = SQLAlchemyResourceStore(session, ServiceModel, "services")
        with pytest.raises(ValueError):
            await store.list(scope_all(U1, {"nonexistent": 1}))


@pytest.mark.asyncio
async def test_writes_are_durable_across_sessions(session_factory):
    async with session_factory() as session:
        store = SQLAlchemyResourceStore(session, ServiceModel, "services")
        record = await store.insert(scope_all(U1), {"name": "Corte", "price": 1, "duration": 1})
        await store.update(scope_point(record.id, U1), {"price": 2})

    async with session_factory() as session:
        store = SQLAlchemyResourceStore(session, ServiceModel, "services")
        rows = await store.list(scope_all(U1), [SortKey("name")])

    assert [r.fields["price"] for r in rows] == [2]
