"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from shopstore.domain.models.enums import ProductStatus
from shopstore.domain.models.product import Product as DomainProduct
from shopstore.domain.repositories.products import ProductRepository
from shopstore.infrastructure.persistence.models.shop import Product as OrmProduct

from .base import SqlEntityRepository


class SqlProductRepository(SqlEntityRepository[DomainProduct], ProductRepository):
    entity_class = DomainProduct
    orm_class = OrmProduct

    async def list(
        self,
        status: ProductStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[DomainProduct]:
        table = self._table()
        stmt = (
            self._select(include_soft_deleted=include_soft_deleted)
            .order_by(table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        if status is not None:
            stmt = stmt.where(table.c.status == status.value)
        return await self._fetch_all(stmt)
