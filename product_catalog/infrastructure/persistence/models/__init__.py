"""SQLAlchemy models."""

from product_catalog.infrastructure.persistence.models.product import ProductModel

__all__ = ["ProductModel"]
