"""Common error classes returned through the dispatch pipeline.

These are the typed, expected outcomes a caller of the dispatcher must
handle. They are returned inside ``Failure``, never raised.

Error Types:
- ValidationError: One or more request fields failed their rules
- NotFoundError: Operation required an entity that does not exist
- CancelledError: Cancellation signal observed before completion
- SubscriberError: One or more notification subscribers failed

Usage:
    from product_catalog.core.errors import NotFoundError
    from product_catalog.core.enums import ErrorCode
    from product_catalog.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.PRODUCT_NOT_FOUND,
        message="Product not found",
        resource_type="Product",
        resource_id=str(product_id),
    ))
"""

from dataclasses import dataclass

from product_catalog.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldViolation:
    """A single failed validation rule.

    Attributes:
        field: Request field the rule applies to.
        message: Human-readable explanation.
    """

    field: str
    message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable summary of all violations.
        field: First field that failed validation.
        violations: Every failed rule, in rule declaration order.
        details: Additional context.
    """

    field: str | None = None
    violations: tuple[FieldViolation, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Product).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CancelledError(DomainError):
    """Request abandoned because its cancellation signal fired.

    Work already committed before the signal was observed is not rolled back.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        stage: Pipeline stage where cancellation was observed
            (received, handling, publishing).
        details: Additional context.
    """

    stage: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SubscriberFailure:
    """One subscriber that raised while handling a notification.

    Attributes:
        subscriber: Subscriber name (qualified function name).
        error_type: Exception class name.
        error_message: Exception message.
    """

    subscriber: str
    error_type: str
    error_message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SubscriberError(DomainError):
    """Aggregate failure of a notification fan-out.

    Reported to the caller of ``publish``. Never invalidates the write that
    produced the notification.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        event_type: Notification class name.
        failures: Failed subscribers, in invocation order.
        details: Additional context.
    """

    event_type: str
    failures: tuple[SubscriberFailure, ...] = ()
