"""Storefront ORM models: categories, discounts, media, orders, line items, products.

Column names are exactly the entity attribute names (shopstore.domain.models.columns)
so a row maps 1:1 onto an AttributeRecord.  Every table carries the common
id / status / memo / metas / timestamp columns via EntityColumns.

price and amount are unscaled NUMERIC so any decimal string the entities hold
reads back unchanged.

soft_deleted_at is NOT NULL: live rows hold MAX_DATETIME, which keeps
"WHERE soft_deleted_at = MAX" index-friendly.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shopstore.infrastructure.database import Base

from .types import StringDateTime, StringInteger, StringNumeric

_ID = String(40)
_STATUS = String(40)


class EntityColumns:
    """Columns shared by every storefront table."""

    id: Mapped[str] = mapped_column(_ID, primary_key=True)
    status: Mapped[str] = mapped_column(_STATUS, nullable=False, index=True)
    memo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    metas: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # JSON object text
    created_at: Mapped[str] = mapped_column(StringDateTime, nullable=False)
    updated_at: Mapped[str] = mapped_column(StringDateTime, nullable=False)
    soft_deleted_at: Mapped[str] = mapped_column(StringDateTime, nullable=False, index=True)


class Category(EntityColumns, Base):
    """Category tree node.  parent_id is empty for root categories."""

    __tablename__ = "shop_category"

    parent_id: Mapped[Optional[str]] = mapped_column(_ID, nullable=True, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Discount(EntityColumns, Base):
    """Discount code.  type: 'percent' | 'amount'."""

    __tablename__ = "shop_discount"
    __table_args__ = (Index("ix_shop_discount_code", "code"),)

    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(40), nullable=False)
    code: Mapped[str] = mapped_column(String(40), nullable=False)
    amount: Mapped[str] = mapped_column(StringNumeric(), nullable=False)
    starts_at: Mapped[Optional[str]] = mapped_column(StringDateTime, nullable=True)
    ends_at: Mapped[Optional[str]] = mapped_column(StringDateTime, nullable=True)


class Media(EntityColumns, Base):
    """Media file attached to another entity (usually a product)."""

    __tablename__ = "shop_media"

    entity_id: Mapped[str] = mapped_column(_ID, nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    media_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    media_type: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    sequence: Mapped[str] = mapped_column(StringInteger, nullable=False, default="0")


class Order(EntityColumns, Base):
    __tablename__ = "shop_order"

    customer_id: Mapped[str] = mapped_column(_ID, nullable=False, index=True)
    price: Mapped[str] = mapped_column(StringNumeric(), nullable=False)
    quantity: Mapped[str] = mapped_column(StringInteger, nullable=False)


class OrderLineItem(EntityColumns, Base):
    __tablename__ = "shop_order_line_item"

    order_id: Mapped[str] = mapped_column(_ID, nullable=False, index=True)
    product_id: Mapped[str] = mapped_column(_ID, nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[str] = mapped_column(StringNumeric(), nullable=False)
    quantity: Mapped[str] = mapped_column(StringInteger, nullable=False)


class Product(EntityColumns, Base):
    __tablename__ = "shop_product"

    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    short_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[str] = mapped_column(StringNumeric(), nullable=False)
    quantity: Mapped[str] = mapped_column(StringInteger, nullable=False)
