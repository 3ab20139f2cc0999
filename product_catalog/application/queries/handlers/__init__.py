"""Query handlers."""

from product_catalog.application.queries.handlers.get_all_products_handler import (
    GetAllProductsHandler,
)

__all__ = ["GetAllProductsHandler"]
