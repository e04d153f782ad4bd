"""SQLAlchemy implementation of MediaRepository."""

from __future__ import annotations

from shopstore.domain.models.media import Media as DomainMedia
from shopstore.domain.repositories.media import MediaRepository
from shopstore.infrastructure.persistence.models.shop import Media as OrmMedia

from .base import SqlEntityRepository


class SqlMediaRepository(SqlEntityRepository[DomainMedia], MediaRepository):
    entity_class = DomainMedia
    orm_class = OrmMedia

    async def list(
        self,
        entity_id: str | None = None,
        limit: int = 50,
        offset: int = 0,
        include_soft_deleted: bool = False,
    ) -> list[DomainMedia]:
        table = self._table()
        stmt = self._select(include_soft_deleted=include_soft_deleted).limit(limit).offset(offset)
        if entity_id is not None:
            stmt = stmt.where(table.c.entity_id == entity_id).order_by(table.c.sequence.asc())
        else:
            stmt = stmt.order_by(table.c.created_at.desc())
        return await self._fetch_all(stmt)
