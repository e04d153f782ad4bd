"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports all repository implementations and the DI factory.
"""

from shopstore.infrastructure.persistence.models import *  # noqa: F401, F403
from shopstore.infrastructure.persistence.models import __all__ as _orm_all
from shopstore.infrastructure.persistence.repositories import (
    Repositories,
    SqlCategoryRepository,
    SqlDiscountRepository,
    SqlEntityRepository,
    SqlMediaRepository,
    SqlOrderLineItemRepository,
    SqlOrderRepository,
    SqlProductRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "Repositories",
    "SqlEntityRepository",
    "SqlCategoryRepository",
    "SqlDiscountRepository",
    "SqlMediaRepository",
    "SqlOrderRepository",
    "SqlOrderLineItemRepository",
    "SqlProductRepository",
    "get_repositories",
]
