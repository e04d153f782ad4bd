"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in shopstore/infrastructure/persistence/ and
are wired at the application boundary via dependency injection.

Import from this package rather than individual modules to avoid coupling
handlers to specific repository module paths.
"""

from .base import Repository
from .categories import CategoryRepository
from .discounts import DiscountRepository
from .media import MediaRepository
from .orders import OrderLineItemRepository, OrderRepository
from .products import ProductRepository

__all__ = [
    "Repository",
    "CategoryRepository",
    "DiscountRepository",
    "MediaRepository",
    "OrderRepository",
    "OrderLineItemRepository",
    "ProductRepository",
]
