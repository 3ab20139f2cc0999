"""Command handlers."""

from product_catalog.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from product_catalog.application.commands.handlers.delete_product_handler import (
    DeleteProductHandler,
)
from product_catalog.application.commands.handlers.update_product_handler import (
    UpdateProductHandler,
)

__all__ = [
    "CreateProductHandler",
    "DeleteProductHandler",
    "UpdateProductHandler",
]
