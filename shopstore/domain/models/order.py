"""Order entity.

Any status may be set from any other; transition rules, if any, belong to the
checkout workflow, not to the entity.
"""

from __future__ import annotations

from typing import Self

from .columns import COLUMN_CUSTOMER_ID
from .entity import PricedEntity
from .enums import OrderStatus


class Order(PricedEntity):
    __slots__ = ()

    def _apply_defaults(self) -> None:
        self.set_status(OrderStatus.PENDING)
        self.set_customer_id("").set_memo("")
        self.set_price_float(0).set_quantity_int(1)

    @property
    def customer_id(self) -> str:
        return self.get(COLUMN_CUSTOMER_ID)

    def set_customer_id(self, customer_id: str) -> Self:
        return self.set(COLUMN_CUSTOMER_ID, customer_id)

    def is_awaiting_fulfillment(self) -> bool:
        return self.status == OrderStatus.AWAITING_FULFILLMENT

    def is_awaiting_payment(self) -> bool:
        return self.status == OrderStatus.AWAITING_PAYMENT

    def is_awaiting_pickup(self) -> bool:
        return self.status == OrderStatus.AWAITING_PICKUP

    def is_awaiting_shipment(self) -> bool:
        return self.status == OrderStatus.AWAITING_SHIPMENT

    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def is_declined(self) -> bool:
        return self.status == OrderStatus.DECLINED

    def is_disputed(self) -> bool:
        return self.status == OrderStatus.DISPUTED

    def is_manual_verification_required(self) -> bool:
        return self.status == OrderStatus.MANUAL_VERIFICATION_REQUIRED

    def is_partially_shipped(self) -> bool:
        return self.status == OrderStatus.PARTIALLY_SHIPPED

    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    def is_refunded(self) -> bool:
        return self.status == OrderStatus.REFUNDED

    def is_shipped(self) -> bool:
        return self.status == OrderStatus.SHIPPED
