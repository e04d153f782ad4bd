"""Domain model package.

All domain objects are plain Python façades over a string attribute record,
with no ORM or infrastructure dependencies.  Import from this package to
avoid coupling application code to individual module paths.
"""

from .category import Category
from .discount import DISCOUNT_CODE_ALPHABET, Discount, generate_discount_code
from .entity import Entity, PricedEntity
from .enums import (
    CategoryStatus,
    DiscountStatus,
    DiscountType,
    MediaStatus,
    OrderStatus,
    ProductStatus,
)
from .errors import MalformedMetadataError, MalformedTimestampError, ShopstoreError
from .media import Media
from .metas import MetaStore
from .order import Order
from .order_line_item import OrderLineItem
from .product import Product
from .record import AttributeRecord
from .temporal import MAX_DATE, MAX_DATETIME, NULL_DATE, NULL_DATETIME

__all__ = [
    # core
    "AttributeRecord",
    "MetaStore",
    "Entity",
    "PricedEntity",
    # temporal sentinels
    "MAX_DATE",
    "MAX_DATETIME",
    "NULL_DATE",
    "NULL_DATETIME",
    # errors
    "ShopstoreError",
    "MalformedMetadataError",
    "MalformedTimestampError",
    # enums
    "CategoryStatus",
    "DiscountStatus",
    "DiscountType",
    "MediaStatus",
    "OrderStatus",
    "ProductStatus",
    # entities
    "Category",
    "Discount",
    "Media",
    "Order",
    "OrderLineItem",
    "Product",
    # discount codes
    "DISCOUNT_CODE_ALPHABET",
    "generate_discount_code",
]
