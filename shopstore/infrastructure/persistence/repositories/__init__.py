"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary (dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .base import SqlEntityRepository
from .categories import SqlCategoryRepository
from .discounts import SqlDiscountRepository
from .media import SqlMediaRepository
from .orders import SqlOrderLineItemRepository, SqlOrderRepository
from .products import SqlProductRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    categories: SqlCategoryRepository
    discounts: SqlDiscountRepository
    media: SqlMediaRepository
    orders: SqlOrderRepository
    order_line_items: SqlOrderLineItemRepository
    products: SqlProductRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a request-scoped dependency:

        async def handler(session: AsyncSession = Depends(get_session)) -> ...:
            repos = get_repositories(session)
            product = await repos.products.get(product_id)
            await repos.products.update(product.set_title("Mug"))
    """
    return Repositories(
        categories=SqlCategoryRepository(session),
        discounts=SqlDiscountRepository(session),
        media=SqlMediaRepository(session),
        orders=SqlOrderRepository(session),
        order_line_items=SqlOrderLineItemRepository(session),
        products=SqlProductRepository(session),
    )


__all__ = [
    "SqlEntityRepository",
    "SqlCategoryRepository",
    "SqlDiscountRepository",
    "SqlMediaRepository",
    "SqlOrderRepository",
    "SqlOrderLineItemRepository",
    "SqlProductRepository",
    "Repositories",
    "get_repositories",
]
