"""Category repository interface."""

from __future__ import annotations

from abc import abstractmethod

from shopstore.domain.models.category import Category
from shopstore.domain.models.enums import CategoryStatus

from .base import Repository


class CategoryRepository(Repository[Category]):
    """Read/write interface for Category entities.

    parent_id="" selects root categories; None disables the filter.
    """

    @abstractmethod
    async def list(
        self,
        parent_id: str | None = None,
        status: CategoryStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[Category]:
        """Return a page of categories, optionally filtered by parent and status."""
