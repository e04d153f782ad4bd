"""Tests for the filtered listings of the concrete storefront repositories."""

from unittest.mock import AsyncMock, MagicMock

from shopstore.domain.models import CategoryStatus, Discount, OrderStatus
from shopstore.infrastructure.persistence.repositories import (
    SqlCategoryRepository,
    SqlDiscountRepository,
    SqlMediaRepository,
    SqlOrderLineItemRepository,
    SqlOrderRepository,
)


def _mock_session(one=None, rows=()):
    session = AsyncMock()
    mappings = MagicMock(
        one_or_none=MagicMock(return_value=one),
        all=MagicMock(return_value=list(rows)),
    )
    session.execute.return_value = MagicMock(mappings=MagicMock(return_value=mappings), rowcount=1)
    return session


def _sql(session):
    return str(session.execute.call_args.args[0])


async def test_category_list_filters_by_parent_and_status():
    session = _mock_session()
    await SqlCategoryRepository(session).list(parent_id="root", status=CategoryStatus.ACTIVE)
    sql = _sql(session)
    assert "parent_id" in sql
    assert "shop_category.status" in sql


async def test_discount_get_by_code_is_case_insensitive():
    session = _mock_session(one={"id": "d1", "code": "BCDF"})
    discount = await SqlDiscountRepository(session).get_by_code("bcdf")
    assert isinstance(discount, Discount)
    assert discount.code == "BCDF"
    assert "upper" in _sql(session).lower()


async def test_discount_get_by_code_returns_none_when_missing():
    assert await SqlDiscountRepository(_mock_session()).get_by_code("NOPE") is None


async def test_media_list_for_entity_orders_by_sequence():
    session = _mock_session()
    await SqlMediaRepository(session).list(entity_id="p1")
    assert "ORDER BY shop_media.sequence" in _sql(session)


async def test_order_list_filters_by_customer():
    session = _mock_session()
    await SqlOrderRepository(session).list(customer_id="c1", status=OrderStatus.PENDING)
    assert "customer_id" in _sql(session)


async def test_line_items_list_in_creation_order():
    session = _mock_session()
    await SqlOrderLineItemRepository(session).list(order_id="o1")
    assert "shop_order_line_item.created_at ASC" in _sql(session)


async def test_include_soft_deleted_drops_filter():
    session = _mock_session()
    await SqlOrderRepository(session).list(include_soft_deleted=True)
    assert "WHERE" not in _sql(session)
