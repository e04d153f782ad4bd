"""Tests for shopstore/domain/repositories/base.py."""

import pytest

from shopstore.domain.repositories import (
    CategoryRepository,
    DiscountRepository,
    MediaRepository,
    OrderLineItemRepository,
    OrderRepository,
    ProductRepository,
)
from shopstore.domain.repositories.base import Repository


def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(Repository):
        async def get(self, id): return None
        async def list(self, limit=50, offset=0, include_soft_deleted=False): return []
        async def create(self, entity): return entity
        async def update(self, entity): return entity
        async def delete(self, id): return None
        # missing soft_delete

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_repository_full_concrete_subclass_instantiates():
    class _Full(Repository):
        async def get(self, id): return None
        async def list(self, limit=50, offset=0, include_soft_deleted=False): return []
        async def create(self, entity): return entity
        async def update(self, entity): return entity
        async def delete(self, id): return None
        async def soft_delete(self, entity): return entity

    assert _Full() is not None


@pytest.mark.parametrize(
    "interface",
    [
        CategoryRepository,
        DiscountRepository,
        MediaRepository,
        OrderRepository,
        OrderLineItemRepository,
        ProductRepository,
    ],
)
def test_specialised_interfaces_extend_repository(interface):
    assert issubclass(interface, Repository)
    with pytest.raises(TypeError):
        interface()  # type: ignore[abstract]


def test_discount_repository_declares_get_by_code():
    assert "get_by_code" in DiscountRepository.__abstractmethods__
