"""Order line item: one product row inside an order.

Line items reuse the order status enumeration so that a partially shipped
order can mark each item individually.
"""

from __future__ import annotations

from typing import Self

from .columns import COLUMN_ORDER_ID, COLUMN_PRODUCT_ID, COLUMN_TITLE
from .entity import PricedEntity
from .enums import OrderStatus


class OrderLineItem(PricedEntity):
    __slots__ = ()

    def _apply_defaults(self) -> None:
        self.set_status(OrderStatus.PENDING)
        self.set_title("").set_memo("").set_order_id("").set_product_id("")
        self.set_price_float(0).set_quantity_int(1)

    @property
    def order_id(self) -> str:
        return self.get(COLUMN_ORDER_ID)

    def set_order_id(self, order_id: str) -> Self:
        return self.set(COLUMN_ORDER_ID, order_id)

    @property
    def product_id(self) -> str:
        return self.get(COLUMN_PRODUCT_ID)

    def set_product_id(self, product_id: str) -> Self:
        return self.set(COLUMN_PRODUCT_ID, product_id)

    @property
    def title(self) -> str:
        return self.get(COLUMN_TITLE)

    def set_title(self, title: str) -> Self:
        return self.set(COLUMN_TITLE, title)
