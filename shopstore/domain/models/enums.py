"""Domain enumerations for the storefront entities.

All string-valued enums use the str mixin so they compare equal to the plain
strings held in the attribute record.  Status values form flat sets: no
transition graph is enforced here.
"""

from enum import Enum


class CategoryStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    INACTIVE = "inactive"


class DiscountStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    INACTIVE = "inactive"


class DiscountType(str, Enum):
    """How a discount's amount is applied."""

    AMOUNT = "amount"
    PERCENT = "percent"


class MediaStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    INACTIVE = "inactive"


class OrderStatus(str, Enum):
    """Shared by orders and order line items."""

    AWAITING_FULFILLMENT = "awaiting_fulfillment"
    AWAITING_PAYMENT = "awaiting_payment"
    AWAITING_PICKUP = "awaiting_pickup"
    AWAITING_SHIPMENT = "awaiting_shipment"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    DECLINED = "declined"
    DISPUTED = "disputed"
    MANUAL_VERIFICATION_REQUIRED = "manual_verification_required"
    PARTIALLY_SHIPPED = "partially_shipped"
    PENDING = "pending"
    REFUNDED = "refunded"
    SHIPPED = "shipped"


class ProductStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    DISABLED = "disabled"
