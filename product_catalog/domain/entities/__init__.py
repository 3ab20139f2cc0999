"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from product_catalog.domain.entities.product import Product

__all__ = ["Product"]
