"""ORM model registry: imports every model module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from shopstore.infrastructure.persistence.models.shop import (
    Category,
    Discount,
    Media,
    Order,
    OrderLineItem,
    Product,
)

__all__ = [
    "Category",
    "Discount",
    "Media",
    "Order",
    "OrderLineItem",
    "Product",
]
