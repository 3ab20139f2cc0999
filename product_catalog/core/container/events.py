"""Notification publisher dependency factory.

Application-scoped singleton for product notifications. Subscribers are
wired here at startup, once.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from product_catalog.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from product_catalog.domain.protocols.notification_publisher_protocol import (
        NotificationPublisherProtocol,
    )


@lru_cache()
def get_notification_publisher() -> "NotificationPublisherProtocol":
    """Get notification publisher singleton (app-scoped).

    Returns InMemoryNotificationPublisher with the LoggingEventHandler
    subscribed to every product event.

    Returns:
        Publisher implementing NotificationPublisherProtocol.

    Usage:
        publisher = get_notification_publisher()
        publisher.subscribe(ProductCreated, refresh_search_index)
    """
    from product_catalog.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from product_catalog.infrastructure.events.in_memory_publisher import (
        InMemoryNotificationPublisher,
    )

    logger = get_logger()
    publisher = InMemoryNotificationPublisher(logger=logger)
    LoggingEventHandler(logger=logger).register(publisher)
    return publisher
