"""Discount repository interface."""

from __future__ import annotations

from abc import abstractmethod

from shopstore.domain.models.discount import Discount
from shopstore.domain.models.enums import DiscountStatus

from .base import Repository


class DiscountRepository(Repository[Discount]):
    """Read/write interface for Discount entities.

    get_by_code returns None when no live (not soft-deleted) discount has the
    code.
    """

    @abstractmethod
    async def get_by_code(self, code: str) -> Discount | None:
        """Return the live discount with the given code (case-insensitive), or None."""

    @abstractmethod
    async def list(
        self,
        status: DiscountStatus | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[Discount]:
        """Return a page of discounts, optionally filtered by status."""
