"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
domain layer.  Concrete implementations live in
shopstore/infrastructure/persistence/ and are wired at the application
boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is an Entity façade (never an ORM row).  Identifiers are opaque strings.
  - create() writes entity.data(); update() writes only entity.data_changed().
    Both mark the entity clean once the statement has been issued.
  - list() accepts only limit/offset and the soft-delete switch; filters are
    declared on each specialised interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from shopstore.domain.models.entity import Entity

T = TypeVar("T", bound=Entity)


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for a storefront entity."""

    @abstractmethod
    async def get(self, id: str) -> T | None:
        """Return the entity with the given id, or None if not found."""

    @abstractmethod
    async def list(
        self, limit: int = 50, offset: int = 0, include_soft_deleted: bool = False
    ) -> list[T]:
        """Return a page of entities ordered by creation time (newest first)."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it, clean."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist the entity's changed attributes and return it, clean."""

    @abstractmethod
    async def delete(self, id: str) -> None:
        """Remove the entity with the given id."""

    @abstractmethod
    async def soft_delete(self, entity: T) -> T:
        """Stamp soft_deleted_at with the current time and persist it."""
