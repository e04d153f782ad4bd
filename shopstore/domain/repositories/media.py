"""Media repository interface."""

from __future__ import annotations

from abc import abstractmethod

from shopstore.domain.models.media import Media

from .base import Repository


class MediaRepository(Repository[Media]):
    """Read/write interface for Media entities."""

    @abstractmethod
    async def list(
        self,
        entity_id: str | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[Media]:
        """Return a page of media.  When entity_id is given, ordered by sequence."""
