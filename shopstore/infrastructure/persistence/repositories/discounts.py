"""SQLAlchemy implementation of DiscountRepository."""

from __future__ import annotations

from sqlalchemy import func

from shopstore.domain.models.discount import Discount as DomainDiscount
from shopstore.domain.models.enums import DiscountStatus
from shopstore.domain.repositories.discounts import DiscountRepository
from shopstore.infrastructure.persistence.models.shop import Discount as OrmDiscount

from .base import SqlEntityRepository


class SqlDiscountRepository(SqlEntityRepository[DomainDiscount], DiscountRepository):
    entity_class = DomainDiscount
    orm_class = OrmDiscount

    async def get_by_code(self, code: str) -> DomainDiscount | None:
        table = self._table()
        stmt = self._select(func.upper(table.c.code) == code.upper()).limit(1)
        return await self._fetch_one(stmt)

    async def list(
        self,
        status: DiscountStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[DomainDiscount]:
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
