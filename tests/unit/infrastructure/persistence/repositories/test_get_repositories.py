"""Tests for the get_repositories() DI factory."""

from unittest.mock import AsyncMock

from shopstore.infrastructure.persistence.repositories import (
    Repositories,
    SqlCategoryRepository,
    SqlDiscountRepository,
    SqlMediaRepository,
    SqlOrderLineItemRepository,
    SqlOrderRepository,
    SqlProductRepository,
    get_repositories,
)


def _repos():
    return get_repositories(AsyncMock())


def test_get_repositories_returns_repositories_instance():
    assert isinstance(_repos(), Repositories)


def test_repositories_categories_is_correct_type():
    assert isinstance(_repos().categories, SqlCategoryRepository)


def test_repositories_discounts_is_correct_type():
    assert isinstance(_repos().discounts, SqlDiscountRepository)


def test_repositories_media_is_correct_type():
    assert isinstance(_repos().media, SqlMediaRepository)


def test_repositories_orders_is_correct_type():
    assert isinstance(_repos().orders, SqlOrderRepository)


def test_repositories_order_line_items_is_correct_type():
    assert isinstance(_repos().order_line_items, SqlOrderLineItemRepository)


def test_repositories_products_is_correct_type():
    assert isinstance(_repos().products, SqlProductRepository)


def test_all_repositories_share_the_same_session():
    session = AsyncMock()
    repos = get_repositories(session)
    assert repos.products._session is session
    assert repos.orders._session is session
