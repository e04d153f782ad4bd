"""Initial storefront schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_TABLES = (
    "shop_category",
    "shop_discount",
    "shop_media",
    "shop_order",
    "shop_order_line_item",
    "shop_product",
)


def _entity_columns() -> list[sa.Column]:
    """id / status / memo / metas / timestamps, present on every table."""
    return [
        sa.Column("id", sa.String(40), primary_key=True),
        sa.Column("status", sa.String(40), nullable=False),
        sa.Column("memo", sa.Text, nullable=True),
        sa.Column("metas", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime, nullable=False),
        sa.Column("updated_at", sa.DateTime, nullable=False),
        sa.Column("soft_deleted_at", sa.DateTime, nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "shop_category",
        *_entity_columns(),
        sa.Column("parent_id", sa.String(40), nullable=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
    )
    op.create_index("ix_shop_category_parent_id", "shop_category", ["parent_id"])

    op.create_table(
        "shop_discount",
        *_entity_columns(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("type", sa.String(40), nullable=False),
        sa.Column("code", sa.String(40), nullable=False),
        sa.Column("amount", sa.Numeric(), nullable=False),
        sa.Column("starts_at", sa.DateTime, nullable=True),
        sa.Column("ends_at", sa.DateTime, nullable=True),
    )
    op.create_index("ix_shop_discount_code", "shop_discount", ["code"])

    op.create_table(
        "shop_media",
        *_entity_columns(),
        sa.Column("entity_id", sa.String(40), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("media_url", sa.Text, nullable=False),
        sa.Column("media_type", sa.String(100), nullable=False),
        sa.Column("sequence", sa.Integer, nullable=False),
    )
    op.create_index("ix_shop_media_entity_id", "shop_media", ["entity_id"])

    op.create_table(
        "shop_order",
        *_entity_columns(),
        sa.Column("customer_id", sa.String(40), nullable=False),
        sa.Column("price", sa.Numeric(), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
    )
    op.create_index("ix_shop_order_customer_id", "shop_order", ["customer_id"])

    op.create_table(
        "shop_order_line_item",
        *_entity_columns(),
        sa.Column("order_id", sa.String(40), nullable=False),
        sa.Column("product_id", sa.String(40), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("price", sa.Numeric(), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
    )
    op.create_index("ix_shop_order_line_item_order_id", "shop_order_line_item", ["order_id"])
    op.create_index("ix_shop_order_line_item_product_id", "shop_order_line_item", ["product_id"])

    op.create_table(
        "shop_product",
        *_entity_columns(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("short_description", sa.Text, nullable=True),
        sa.Column("price", sa.Numeric(), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
    )

    for table in _TABLES:
        op.create_index(f"ix_{table}_status", table, ["status"])
        op.create_index(f"ix_{table}_soft_deleted_at", table, ["soft_deleted_at"])


def downgrade() -> None:
    for table in reversed(_TABLES):
        op.drop_table(table)
