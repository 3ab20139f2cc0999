"""Application services."""

from product_catalog.application.services.product_catalog import (
    ProductCatalog,
    to_price,
)

__all__ = ["ProductCatalog", "to_price"]
