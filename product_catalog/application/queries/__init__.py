"""Application queries (CQRS read side)."""

from product_catalog.application.queries.product_queries import GetAllProducts

__all__ = ["GetAllProducts"]
