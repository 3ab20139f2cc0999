"""Notification publisher protocol (port) for domain events.

The dispatcher hands every notification a handler produced to an object
satisfying this protocol. Infrastructure provides the adapter
(InMemoryNotificationPublisher).

Delivery rules every adapter must honour:
    1. Subscribers run sequentially in registration order (deterministic).
    2. Zero subscribers is a no-op, not an error.
    3. A subscriber failure never stops the remaining subscribers and never
       undoes the write that produced the notification. All failures are
       aggregated into one SubscriberError returned to the caller.
    4. The cancellation token is checked before each subscriber call.

Usage:
    >>> async def log_created(event: ProductCreated) -> None:
    ...     logger.info("product_created", product_id=str(event.product_id))
    >>>
    >>> publisher.subscribe(ProductCreated, log_created)
    >>> result = await publisher.publish(event, cancellation)
    >>> if isinstance(result, Failure):
    ...     print(result.error.failures)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from product_catalog.core.cancellation import CancellationToken
from product_catalog.core.errors import SubscriberError
from product_catalog.core.result import Result
from product_catalog.domain.events.base_event import DomainEvent

# Type alias for subscriber functions
Subscriber = Callable[[DomainEvent], Awaitable[None]]
"""Async function receiving one event and returning None (side effects only)."""


class NotificationPublisherProtocol(Protocol):
    """Protocol for notification publisher implementations.

    Methods:
        subscribe: Register a subscriber for an exact event type
        publish: Deliver an event to its subscribers
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        subscriber: Subscriber,
    ) -> None:
        """Register subscriber for a specific event type.

        Args:
            event_type: Event class (exact type match, no inheritance).
            subscriber: Async callable invoked with the event.
        """
        ...

    async def publish(
        self,
        event: DomainEvent,
        cancellation: CancellationToken | None = None,
    ) -> Result[None, SubscriberError]:
        """Deliver event to every subscriber registered for type(event).

        Args:
            event: Notification to deliver.
            cancellation: Checked before each subscriber call.

        Returns:
            Success(None) if every subscriber completed (or none exist),
            Failure(SubscriberError) listing each failed subscriber.

        Raises:
            OperationCancelled: If the token is cancelled between subscribers.
        """
        ...
