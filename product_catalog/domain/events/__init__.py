"""Domain events module.

Exports the DomainEvent base and the product notifications.

Usage:
    from product_catalog.domain.events import ProductCreated
"""

from product_catalog.domain.events.base_event import DomainEvent
from product_catalog.domain.events.product_events import (
    ProductCreated,
    ProductDeleted,
    ProductUpdated,
)

__all__ = [
    "DomainEvent",
    "ProductCreated",
    "ProductDeleted",
    "ProductUpdated",
]
