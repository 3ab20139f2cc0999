"""Product repository adapters."""

from product_catalog.infrastructure.persistence.repositories.in_memory_product_repository import (
    InMemoryProductRepository,
)
from product_catalog.infrastructure.persistence.repositories.product_repository import (
    SqlProductRepository,
)

__all__ = ["InMemoryProductRepository", "SqlProductRepository"]
