"""SQLAlchemy implementations of OrderRepository and OrderLineItemRepository."""

from __future__ import annotations

from shopstore.domain.models.enums import OrderStatus
from shopstore.domain.models.order import Order as DomainOrder
from shopstore.domain.models.order_line_item import OrderLineItem as DomainOrderLineItem
from shopstore.domain.repositories.orders import OrderLineItemRepository, OrderRepository
from shopstore.infrastructure.persistence.models.shop import Order as OrmOrder
from shopstore.infrastructure.persistence.models.shop import OrderLineItem as OrmOrderLineItem

from .base import SqlEntityRepository


class SqlOrderRepository(SqlEntityRepository[DomainOrder], OrderRepository):
    entity_class = DomainOrder
    orm_class = OrmOrder

    async def list(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[DomainOrder]:
        table = self._table()
        stmt = (
            self._select(include_soft_deleted=include_soft_deleted)
            .order_by(table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        if customer_id is not None:
            stmt = stmt.where(table.c.customer_id == customer_id)
        if status is not None:
            stmt = stmt.where(table.c.status == status.value)
        return await self._fetch_all(stmt)


class SqlOrderLineItemRepository(SqlEntityRepository[DomainOrderLineItem], OrderLineItemRepository):
    entity_class = DomainOrderLineItem
    orm_class = OrmOrderLineItem

    async def list(
        self,
        order_id: str | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[DomainOrderLineItem]:
        table = self._table()
        # line items read in insertion order, unlike the other listings
        stmt = (
            self._select(include_soft_deleted=include_soft_deleted)
            .order_by(table.c.created_at.asc())
            .limit(limit)
            .offset(offset)
        )
        if order_id is not None:
            stmt = stmt.where(table.c.order_id == order_id)
        return await self._fetch_all(stmt)
