"""Product domain events.

Facts published after a product write has been committed. They carry the
post-write state so subscribers can react without touching the repository.

Events:
1. ProductCreated - New product persisted
2. ProductUpdated - Name/price replaced
3. ProductDeleted - Product removed

Handlers:
- LoggingEventHandler: ALL events (INFO level)
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from product_catalog.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class ProductCreated(DomainEvent):
    """Emitted after a new product is persisted.

    Attributes:
        product_id: Identifier assigned at creation.
        name: Product name.
        price: Product price.
    """

    product_id: UUID
    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True, slots=True)
class ProductUpdated(DomainEvent):
    """Emitted after a product's name/price are updated.

    Attributes:
        product_id: Updated product.
        name: New name.
        price: New price.
    """

    product_id: UUID
    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True, slots=True)
class ProductDeleted(DomainEvent):
    """Emitted after a product is removed.

    Attributes:
        product_id: Removed product.
    """

    product_id: UUID
