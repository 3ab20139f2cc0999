"""Request dispatcher: validate -> handle -> publish.

Per-call state machine:

    Received -> Validating -> Rejected
                           -> Validated -> Handling -> Completed
                                                    -> Failed

Ordering guarantees:
    - A request whose rule set fails is rejected before its handler is even
      resolved: no repository call, no notification.
    - A notification returned by the handler is published after the
      handler's write completed and before dispatch returns. Subscriber
      failures are logged and reported by the publisher but never change the
      dispatch result; the write stays committed.
    - A handler Failure (e.g., NotFoundError) is returned as-is with no
      notification. StorageError raised by a repository is logged and
      re-raised unchanged. Nothing is retried.

Cancellation:
    - Token already cancelled on entry: Failure(CancelledError(stage="received")).
    - Token cancelled mid-flight: the next repository or subscriber boundary
      raises OperationCancelled, converted to Failure(CancelledError) with the
      stage where it was observed. Committed work is not rolled back.

Usage:
    dispatcher = RequestDispatcher(
        handlers=handler_registry,
        validators=validator_registry,
        publisher=publisher,
        logger=logger,
    )
    result = await dispatcher.dispatch(CreateProduct(name="Laptop", price=price))
"""

from enum import Enum
from typing import Any

from uuid_extensions import uuid7

from product_catalog.application.cqrs.handler_registry import HandlerRegistry
from product_catalog.core.cancellation import CancellationToken, OperationCancelled
from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import CancelledError, DomainError, StorageError
from product_catalog.core.result import Failure, Result, Success
from product_catalog.core.validation import ValidatorRegistry
from product_catalog.domain.events.base_event import DomainEvent
from product_catalog.domain.protocols.logger_protocol import LoggerProtocol
from product_catalog.domain.protocols.notification_publisher_protocol import (
    NotificationPublisherProtocol,
)


class DispatchStage(str, Enum):
    """Pipeline stages, used in logs and CancelledError.stage."""

    RECEIVED = "received"
    VALIDATING = "validating"
    HANDLING = "handling"
    PUBLISHING = "publishing"


class RequestDispatcher:
    """Routes each request through validation, its handler and fan-out.

    Holds no per-request state; many dispatches may run concurrently.
    """

    def __init__(
        self,
        handlers: HandlerRegistry,
        validators: ValidatorRegistry,
        publisher: NotificationPublisherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize dispatcher with its startup-built collaborators.

        Args:
            handlers: Request type -> handler registry.
            validators: Request type -> rule set registry.
            publisher: Notification publisher for handler events.
            logger: Structured logger.
        """
        self._handlers = handlers
        self._validators = validators
        self._publisher = publisher
        self._logger = logger

    async def dispatch(
        self,
        request: Any,
        cancellation: CancellationToken | None = None,
    ) -> Result[Any, DomainError]:
        """Run one request through the pipeline.

        Args:
            request: Command or query instance.
            cancellation: Caller's cancellation signal (never cancelled if None).

        Returns:
            Success(value) with the handler's value, or Failure with
            ValidationError, NotFoundError or CancelledError.

        Raises:
            ConfigurationError: No handler registered for the request type.
            StorageError: Repository failure, propagated unchanged.
        """
        token = cancellation or CancellationToken.none()
        log = self._logger.bind(
            request_type=type(request).__name__,
            request_id=str(uuid7()),
        )

        if token.is_cancelled:
            return self._cancelled(log, DispatchStage.RECEIVED)

        log.debug("request_received")

        validated = self._validators.validate(request)
        if isinstance(validated, Failure):
            log.info(
                "request_rejected",
                violations=[v.field for v in validated.error.violations],
            )
            return validated

        handler = self._handlers.resolve(type(request))

        try:
            outcome = await handler.handle(request, token)
        except OperationCancelled:
            return self._cancelled(log, DispatchStage.HANDLING)
        except StorageError as e:
            log.error("request_failed", error=e, operation=e.operation)
            raise

        if isinstance(outcome, Failure):
            log.info(
                "request_failed",
                error_code=outcome.error.code.value,
                error_message=outcome.error.message,
            )
            return outcome

        handled = outcome.value
        if handled.notification is not None:
            try:
                await self._publish(log, handled.notification, token)
            except OperationCancelled:
                return self._cancelled(log, DispatchStage.PUBLISHING)

        log.info("request_completed")
        return Success(value=handled.value)

    async def _publish(
        self,
        log: LoggerProtocol,
        notification: DomainEvent,
        token: CancellationToken,
    ) -> None:
        published = await self._publisher.publish(notification, token)
        if isinstance(published, Failure):
            # Write already committed; report, never fail the request
            log.warning(
                "notification_subscribers_failed",
                event_type=published.error.event_type,
                event_id=str(notification.event_id),
                failed_subscribers=[f.subscriber for f in published.error.failures],
            )

    def _cancelled(
        self, log: LoggerProtocol, stage: DispatchStage
    ) -> Failure[CancelledError]:
        log.info("request_cancelled", stage=stage.value)
        return Failure(
            error=CancelledError(
                code=ErrorCode.OPERATION_CANCELLED,
                message=f"Request cancelled during {stage.value}",
                stage=stage.value,
            )
        )
