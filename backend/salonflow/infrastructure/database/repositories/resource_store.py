"""Concrete store adapter backed by SQLAlchemy — one instance per resource table."""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import and_, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from salonflow.application.interfaces import ResourceStore, SortKey
from salonflow.application.ownership import ScopedQuery
from salonflow.domain.entities import ResourceRecord
from salonflow.infrastructure.database.base import OwnedRecordMixin

logger = logging.getLogger(__name__)

# Never written from a validated payload: identity, owner and audit columns.
_PROTECTED_FIELDS = frozenset({"id", "owner_id", "created_at", "updated_at"})


def scoped_clause(model: type[OwnedRecordMixin], query: ScopedQuery):
    """Build the WHERE clause for ``query``: always ``owner_id = ...`` first.

    Raises:
        TypeError: if ``query`` was not produced by the ownership filter.
        ValueError: if a filter names a field the model does not have.
    """
    if not isinstance(query, ScopedQuery):
        raise TypeError(
            f"Store queries must be scoped to an owner, got {type(query).__name__}"
        )
    terms = [model.owner_id == query.owner_id]
    if query.id is not None:
        terms.append(model.id == query.id)
    columns = inspect(model).column_attrs
    for name, value in query.filters.items():
        if name not in columns or name in _PROTECTED_FIELDS:
            raise ValueError(f"Unknown filter field '{name}' for {model.__tablename__}")
        terms.append(getattr(model, name) == value)
    return and_(*terms)


def _as_aware(value: Any) -> Any:
    # SQLite hands DateTime(timezone=True) values back naive.
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyResourceStore(ResourceStore):
    """Implements the ResourceStore port for a single ORM model.

    Each mutation is committed before the method returns, so a successful
    return always means the write is durable.
    """

    def __init__(
        self,
        session: AsyncSession,
        model: type[OwnedRecordMixin],
        resource_type: str,
    ):
        self._session = session
        self._model = model
        self._resource_type = resource_type
        self._fields = [attr.key for attr in inspect(model).column_attrs]

    def _to_record(self, row: OwnedRecordMixin) -> ResourceRecord:
        """Map ORM model → domain record (canonical field names)."""
        values = {name: _as_aware(getattr(row, name)) for name in self._fields}
        return ResourceRecord(
            resource_type=self._resource_type,
            id=values.pop("id"),
            owner_id=values.pop("owner_id"),
            created_at=values.pop("created_at"),
            updated_at=values.pop("updated_at"),
            fields=values,
        )

    def _writable(self, values: dict[str, Any]) -> dict[str, Any]:
        return {
            name: value
            for name, value in values.items()
            if name in self._fields and name not in _PROTECTED_FIELDS
        }

    async def _first(self, query: ScopedQuery) -> OwnedRecordMixin | None:
        stmt = select(self._model).where(scoped_clause(self._model, query))
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def _commit(self) -> None:
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise

    async def list(
        self, query: ScopedQuery, order: Sequence[SortKey] = ()
    ) -> list[ResourceRecord]:
        stmt = select(self._model).where(scoped_clause(self._model, query))
        for key in order:
            column = getattr(self._model, key.field)
            stmt = stmt.order_by(column.desc() if key.descending else column.asc())
        result = await self._session.execute(stmt)
        return [self._to_record(row) for row in result.scalars().all()]

    async def find_one(self, query: ScopedQuery) -> ResourceRecord | None:
        row = await self._first(query)
        return self._to_record(row) if row is not None else None

    async def insert(self, query: ScopedQuery, values: dict[str, Any]) -> ResourceRecord:
        if not isinstance(query, ScopedQuery):
            raise TypeError("Inserts must carry a scoped query")
        row = self._model(**self._writable(values), owner_id=query.owner_id)
        self._session.add(row)
        await self._session.flush()
        record = self._to_record(row)
        await self._commit()
        logger.debug("Inserted %s %s", self._resource_type, record.id)
        return record

    async def update(
        self, query: ScopedQuery, patch: dict[str, Any]
    ) -> ResourceRecord | None:
        row = await self._first(query)
        if row is None:
            return None
        for name, value in self._writable(patch).items():
            setattr(row, name, value)
        # Touch even an empty patch so updated_at moves.
        row.updated_at = datetime.now(timezone.utc)
        await self._session.flush()
        record = self._to_record(row)
        await self._commit()
        return record

    async def remove(self, query: ScopedQuery) -> ResourceRecord | None:
        row = await self._first(query)
        if row is None:
            return None
        record = self._to_record(row)
        await self._session.delete(row)
        await self._session.flush()
        await self._commit()
        logger.debug("Deleted %s %s", self._resource_type, record.id)
        return record
