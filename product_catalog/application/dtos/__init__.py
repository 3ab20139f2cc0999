"""Application DTOs."""

from product_catalog.application.dtos.product_dtos import ProductView

__all__ = ["ProductView"]
