"""Notification publisher adapters."""

from product_catalog.infrastructure.events.in_memory_publisher import (
    InMemoryNotificationPublisher,
)

__all__ = ["InMemoryNotificationPublisher"]
