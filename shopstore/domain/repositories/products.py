"""Product repository interface."""

from __future__ import annotations

from abc import abstractmethod

from shopstore.domain.models.enums import ProductStatus
from shopstore.domain.models.product import Product

from .base import Repository


class ProductRepository(Repository[Product]):
    """Read/write interface for Product entities."""

    @abstractmethod
    async def list(
        self,
        status: ProductStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[Product]:
        """Return a page of products, optionally filtered by status."""
