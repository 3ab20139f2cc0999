"""Domain protocols (ports).

Interfaces the application layer depends on; infrastructure supplies the
adapters.
"""

from product_catalog.domain.protocols.logger_protocol import LoggerProtocol
from product_catalog.domain.protocols.notification_publisher_protocol import (
    NotificationPublisherProtocol,
    Subscriber,
)
from product_catalog.domain.protocols.product_repository import ProductRepository

__all__ = [
    "LoggerProtocol",
    "NotificationPublisherProtocol",
    "ProductRepository",
    "Subscriber",
]
