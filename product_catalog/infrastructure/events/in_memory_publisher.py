"""In-memory notification publisher.

Implements NotificationPublisherProtocol using an in-memory dictionary-based
registry. Suitable for single-process deployments; a broker-backed adapter
can replace it without touching handlers or the dispatcher.

Architecture:
    - Implements NotificationPublisherProtocol (hexagonal adapter pattern)
    - Dictionary-based subscriber registry (event_type -> list of subscribers)
    - Sequential delivery in registration order
    - Fail-open per subscriber: one failure doesn't skip the others
    - Failures aggregated into one SubscriberError returned to the caller

Usage:
    >>> @lru_cache()
    >>> def get_notification_publisher() -> NotificationPublisherProtocol:
    ...     return InMemoryNotificationPublisher(logger=get_logger())
    >>>
    >>> publisher = get_notification_publisher()
    >>> publisher.subscribe(ProductCreated, log_product_created)
    >>> await publisher.publish(ProductCreated(product_id=..., name=..., price=...))
"""

from collections import defaultdict

from product_catalog.core.cancellation import CancellationToken, OperationCancelled
from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import SubscriberError, SubscriberFailure
from product_catalog.core.result import Failure, Result, Success
from product_catalog.domain.events.base_event import DomainEvent
from product_catalog.domain.protocols.logger_protocol import LoggerProtocol
from product_catalog.domain.protocols.notification_publisher_protocol import (
    Subscriber,
)


def subscriber_name(subscriber: Subscriber) -> str:
    """Readable subscriber name for logs and SubscriberFailure."""
    return getattr(subscriber, "__qualname__", None) or repr(subscriber)


class InMemoryNotificationPublisher:
    """In-memory notification publisher with fail-open delivery.

    Thread Safety:
        - NOT thread-safe (single-process, single-threaded async design)

    Attributes:
        _subscribers: Event class -> subscribers, in registration order.
            Only exact type matches (no inheritance matching).
        _logger: Logger for subscriber failures and publishing.

    Example:
        >>> publisher = InMemoryNotificationPublisher(logger=logger)
        >>> publisher.subscribe(ProductCreated, audit_product_created)
        >>> publisher.subscribe(ProductCreated, refresh_search_index)
        >>>
        >>> result = await publisher.publish(event)
        >>> # If audit fails, refresh_search_index still runs and
        >>> # result is Failure(SubscriberError(failures=(audit...,)))
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize publisher with logger.

        Args:
            logger: Logger for subscriber failures (warning level) and
                publishing (debug level).
        """
        self._subscribers: dict[type[DomainEvent], list[Subscriber]] = defaultdict(
            list
        )
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        subscriber: Subscriber,
    ) -> None:
        """Register subscriber for specific event type.

        Args:
            event_type: Class of event to handle (e.g., ProductCreated).
            subscriber: Async callable invoked with the event.

        Notes:
            - No duplicate detection (same subscriber can be registered twice)
            - Delivery order follows registration order
        """
        self._subscribers[event_type].append(subscriber)

    def subscriber_count(self, event_type: type[DomainEvent]) -> int:
        """Number of subscribers registered for an exact event type."""
        return len(self._subscribers.get(event_type, []))

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
            Success(None) when every subscriber completed or none exist,
            Failure(SubscriberError) listing the subscribers that raised.

        Raises:
            OperationCancelled: Token cancelled before a subscriber call.

        Flow:
            1. Look up subscribers for type(event)
            2. If none, return immediately (no-op)
            3. Await each subscriber in turn, recording exceptions
            4. Log each failure (warning level) with event_id
            5. Return aggregate result
        """
        event_type = type(event)
        subscribers = list(self._subscribers.get(event_type, []))

        if not subscribers:
            return Success(value=None)

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            subscriber_count=len(subscribers),
        )

        failures: list[SubscriberFailure] = []
        for subscriber in subscribers:
            if cancellation is not None:
                cancellation.raise_if_cancelled()

            try:
                await subscriber(event)
            except OperationCancelled:
                raise
            except Exception as e:
                name = subscriber_name(subscriber)
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=name,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    exc_info=e,
                )
                failures.append(
                    SubscriberFailure(
                        subscriber=name,
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )
                )

        if not failures:
            return Success(value=None)

        return Failure(
            error=SubscriberError(
                code=ErrorCode.SUBSCRIBER_FAILED,
                message=(
                    f"{len(failures)} of {len(subscribers)} subscribers failed "
                    f"for {event_type.__name__}"
                ),
                event_type=event_type.__name__,
                failures=tuple(failures),
            )
        )
