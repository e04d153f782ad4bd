"""Order and order line item repository interfaces."""

from __future__ import annotations

from abc import abstractmethod

from shopstore.domain.models.enums import OrderStatus
from shopstore.domain.models.order import Order
from shopstore.domain.models.order_line_item import OrderLineItem

from .base import Repository


class OrderRepository(Repository[Order]):
    """Read/write interface for Order entities."""

    @abstractmethod
    async def list(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[Order]:
        """Return a page of orders, optionally filtered by customer and status."""


class OrderLineItemRepository(Repository[OrderLineItem]):
    """Read/write interface for OrderLineItem entities."""

    @abstractmethod
    async def list(
        self,
        order_id: str | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[OrderLineItem]:
        """Return a page of line items, optionally restricted to one order."""
