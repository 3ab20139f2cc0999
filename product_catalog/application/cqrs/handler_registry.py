"""Handler registry: request type -> exactly one handler.

Built once by the container at startup and passed by reference into the
RequestDispatcher. Both wiring mistakes (a second handler for a type, or no
handler at all) raise ConfigurationError; neither is a request outcome.
"""

from collections.abc import Iterator

from product_catalog.application.cqrs.handling import RequestHandler
from product_catalog.core.errors import ConfigurationError


class HandlerRegistry:
    """Mapping of request classes to their single handler.

    Example:
        >>> registry = HandlerRegistry()
        >>> registry.register(CreateProduct, CreateProductHandler(product_repo=repo))
        >>> registry.resolve(CreateProduct)
        <CreateProductHandler ...>
        >>> registry.register(CreateProduct, other)
        ConfigurationError: Handler already registered for CreateProduct
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._handlers: dict[type, RequestHandler] = {}

    def register(self, request_type: type, handler: RequestHandler) -> None:
        """Bind a handler to a request type.

        Args:
            request_type: Command or query class.
            handler: Handler instance exposing ``handle(request, cancellation)``.

        Raises:
            ConfigurationError: If the type is already bound.
        """
        if request_type in self._handlers:
            raise ConfigurationError(
                f"Handler already registered for {request_type.__name__}: "
                f"{type(self._handlers[request_type]).__name__}"
            )
        self._handlers[request_type] = handler

    def resolve(self, request_type: type) -> RequestHandler:
        """Return the handler bound to a request type.

        Raises:
            ConfigurationError: If nothing is bound (wiring defect).
        """
        try:
            return self._handlers[request_type]
        except KeyError:
            raise ConfigurationError(
                f"No handler registered for {request_type.__name__}"
            ) from None

    def __contains__(self, request_type: object) -> bool:
        return request_type in self._handlers

    def __iter__(self) -> Iterator[type]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
