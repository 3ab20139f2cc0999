"""Application commands (CQRS write side)."""

from product_catalog.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)

__all__ = ["CreateProduct", "DeleteProduct", "UpdateProduct"]
