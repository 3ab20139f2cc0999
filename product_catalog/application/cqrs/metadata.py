"""CQRS Metadata Types.

Dataclasses and enums for CQRS catalog entries.
These types define the structure of command and query registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Self-documenting - clear field names and docstrings
"""

import inspect
from dataclasses import dataclass
from enum import Enum

from product_catalog.domain.events.base_event import DomainEvent


class CQRSCategory(str, Enum):
    """Categories for CQRS commands and queries.

    Categories match the domain boundaries and help organize
    commands/queries by their functional area.
    """

    PRODUCT = "product"  # Product catalog: create, update, delete, list


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS catalog.

    Attributes:
        command_class: The command dataclass (e.g., CreateProduct).
        handler_class: The handler class (e.g., CreateProductHandler).
        category: Functional category for organization.
        event_class: Notification the handler returns on success, if any.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=CreateProduct,
        ...     handler_class=CreateProductHandler,
        ...     category=CQRSCategory.PRODUCT,
        ...     event_class=ProductCreated,
        ...     description="Create a product and return its id",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    event_class: type[DomainEvent] | None = None
    description: str = ""

    @property
    def emits_events(self) -> bool:
        """Whether the handler returns a notification on success."""
        return self.event_class is not None


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS catalog.

    Queries never change state and never emit notifications.

    Attributes:
        query_class: The query dataclass (e.g., GetAllProducts).
        handler_class: The handler class (e.g., GetAllProductsHandler).
        category: Functional category for organization.
        result_dto_class: Projection type the handler returns.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    result_dto_class: type | None = None
    description: str = ""


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Extract dependency names from handler __init__ signature.

    Used by container auto-wiring to determine what dependencies
    to inject when creating handler instances.

    Args:
        handler_class: The handler class to inspect.

    Returns:
        List of dependency parameter names from __init__.

    Example:
        >>> class CreateProductHandler:
        ...     def __init__(self, product_repo):
        ...         pass
        >>> get_handler_dependencies(CreateProductHandler)
        ['product_repo']
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None or init_method is object.__init__:
        return []
    try:
        sig = inspect.signature(init_method)
    except (ValueError, TypeError):
        return []
    # Skip 'self' parameter
    return list(sig.parameters.keys())[1:]
