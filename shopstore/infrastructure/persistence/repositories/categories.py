"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

from shopstore.domain.models.category import Category as DomainCategory
from shopstore.domain.models.enums import CategoryStatus
from shopstore.domain.repositories.categories import CategoryRepository
from shopstore.infrastructure.persistence.models.shop import Category as OrmCategory

from .base import SqlEntityRepository


class SqlCategoryRepository(SqlEntityRepository[DomainCategory], CategoryRepository):
    entity_class = DomainCategory
    orm_class = OrmCategory

    async def list(
        self,
        parent_id: str | None = None,
        status: CategoryStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[DomainCategory]:
        table = self._table()
        stmt = (
            self._select(include_soft_deleted=include_soft_deleted)
            .order_by(table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        if parent_id is not None:
            stmt = stmt.where(table.c.parent_id == parent_id)
        if status is not None:
            stmt = stmt.where(table.c.status == status.value)
        return await self._fetch_all(stmt)
