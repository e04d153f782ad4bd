"""Shared SQLAlchemy plumbing for the storefront repositories.

Rows are read as plain mappings (column name -> string, via the string-dialect
column types) and wrapped with Entity.from_existing(), so a loaded entity is
clean.  Writes are driven by the entity's change tracking:

  create()  INSERT of entity.data()
  update()  UPDATE of entity.data_changed() only; nothing is sent when clean

Attributes without a matching column are dropped with a warning.  The session
is never committed here: the caller owns the transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement, Select

from shopstore.domain.models.columns import COLUMN_ID
from shopstore.domain.models.entity import Entity
from shopstore.domain.models.temporal import MAX_DATETIME, now_datetime
from shopstore.domain.repositories.base import Repository

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class SqlEntityRepository(Repository[T]):
    """CRUD for one entity type over one table.  Subclasses add list()."""

    entity_class: ClassVar[type[Entity]]
    orm_class: ClassVar[Any]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @classmethod
    def _table(cls) -> Table:
        return cls.orm_class.__table__

    @classmethod
    def _to_domain(cls, row: Mapping[str, Any]) -> T:
        data = {key: "" if value is None else str(value) for key, value in row.items()}
        return cls.entity_class.from_existing(data)  # type: ignore[return-value]

    @classmethod
    def _writable(cls, data: Mapping[str, str]) -> dict[str, str]:
        columns = cls._table().c
        unknown = sorted(key for key in data if key not in columns)
        if unknown:
            logger.warning(
                "%s has no column for %s; attributes not persisted.",
                cls._table().name,
                ", ".join(unknown),
            )
        return {key: value for key, value in data.items() if key in columns}

    def _select(self, *criteria: ColumnElement[bool], include_soft_deleted: bool = False) -> Select:
        table = self._table()
        stmt = select(table).where(*criteria)
        if not include_soft_deleted:
            stmt = stmt.where(table.c.soft_deleted_at == MAX_DATETIME)
        return stmt

    async def _fetch_one(self, stmt: Select) -> T | None:
        result = await self._session.execute(stmt)
        row = result.mappings().one_or_none()
        return self._to_domain(row) if row is not None else None

    async def _fetch_all(self, stmt: Select) -> list[T]:
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.mappings().all()]

    async def get(self, id: str) -> T | None:
        """Return the entity by id, soft-deleted or not."""
        table = self._table()
        return await self._fetch_one(self._select(table.c.id == id, include_soft_deleted=True))

    async def create(self, entity: T) -> T:
        values = self._writable(entity.data())
        await self._session.execute(insert(self._table()).values(**values))
        entity.mark_as_not_dirty()
        return entity

    async def update(self, entity: T) -> T:
        changed = self._writable(entity.data_changed())
        changed.pop(COLUMN_ID, None)
        if not changed:
            logger.debug("%s %s has no changes; update skipped.", self._table().name, entity.id)
            entity.mark_as_not_dirty()
            return entity
        table = self._table()
        stmt = update(table).where(table.c.id == entity.id).values(**changed)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise ValueError(f"{type(entity).__name__} {entity.id} not found")
        entity.mark_as_not_dirty()
        return entity

    async def delete(self, id: str) -> None:
        table = self._table()
        await self._session.execute(delete(table).where(table.c.id == id))

    async def soft_delete(self, entity: T) -> T:
        entity.set_soft_deleted_at(now_datetime())
        return await self.update(entity)
