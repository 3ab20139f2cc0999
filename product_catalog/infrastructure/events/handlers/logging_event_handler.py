"""Logging event handler for product notifications.

Subscribes to every product event and writes one structured INFO log per
event, so the catalog's write history is observable without touching
storage.

Structured Fields:
    - event_id: UUID for event correlation and deduplication
    - occurred_at: ISO 8601 timestamp (UTC)
    - product_id: Affected product
    - name / price: Post-write state (created/updated only)

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> handler.register(publisher)
"""

from product_catalog.domain.events.product_events import (
    ProductCreated,
    ProductDeleted,
    ProductUpdated,
)
from product_catalog.domain.protocols.logger_protocol import LoggerProtocol
from product_catalog.domain.protocols.notification_publisher_protocol import (
    NotificationPublisherProtocol,
)


class LoggingEventHandler:
    """Event handler for structured logging of product events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def register(self, publisher: NotificationPublisherProtocol) -> None:
        """Subscribe every handler method to its event type."""
        publisher.subscribe(ProductCreated, self.handle_product_created)
        publisher.subscribe(ProductUpdated, self.handle_product_updated)
        publisher.subscribe(ProductDeleted, self.handle_product_deleted)

    async def handle_product_created(self, event: ProductCreated) -> None:
        """Log product creation (INFO level)."""
        self._logger.info(
            "product_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            product_id=str(event.product_id),
            name=event.name,
            price=str(event.price),
        )

    async def handle_product_updated(self, event: ProductUpdated) -> None:
        """Log product update (INFO level)."""
        self._logger.info(
            "product_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            product_id=str(event.product_id),
            name=event.name,
            price=str(event.price),
        )

    async def handle_product_deleted(self, event: ProductDeleted) -> None:
        """Log product deletion (INFO level)."""
        self._logger.info(
            "product_deleted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            product_id=str(event.product_id),
        )
