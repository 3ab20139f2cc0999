"""Handler contract shared by every command and query handler.

A handler does its work and returns ``Success(Handled(...))`` carrying the
caller-facing value plus, for writes, the notification describing what
changed. The dispatcher, not the handler, publishes that notification, so
the failure-isolation policy for subscribers lives in one place.

Usage:
    class CreateProductHandler:
        async def handle(
            self, cmd: CreateProduct, cancellation: CancellationToken
        ) -> Result[Handled[UUID], DomainError]:
            ...
            return Success(value=Handled(value=product.id, notification=event))
"""

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from product_catalog.core.cancellation import CancellationToken
from product_catalog.core.errors import DomainError
from product_catalog.core.result import Result
from product_catalog.domain.events.base_event import DomainEvent

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class Handled(Generic[T]):
    """Successful handler output.

    Attributes:
        value: Result returned to the dispatch caller (id, projection, None).
        notification: Event to publish once the handler returned, if any.
    """

    value: T
    notification: DomainEvent | None = None


class RequestHandler(Protocol):
    """Structural type of a handler bound to one request type."""

    async def handle(
        self, request: Any, cancellation: CancellationToken
    ) -> Result[Handled[Any], DomainError]:
        """Execute the request.

        Args:
            request: Request value of the bound type (already validated).
            cancellation: Checked before each repository call.

        Returns:
            Success(Handled) or Failure(DomainError).

        Raises:
            OperationCancelled: Token cancelled at an I/O boundary.
            StorageError: Repository failure (propagated unchanged).
        """
        ...
