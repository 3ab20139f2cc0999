"""Base domain event class.

This module defines the DomainEvent base class used by all notifications in
the catalog. Domain events represent "things that happened" and are always
named in past tense (ProductCreated, ProductDeleted).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (uuid7, time-ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class ProductCreated(DomainEvent):
    ...     product_id: UUID
    ...     name: str
    >>>
    >>> event = ProductCreated(product_id=uuid7(), name="Laptop")
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (ProductCreated, NOT CreateProduct)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Carry enough data that subscribers never re-query storage

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).

    Notes:
        - Events are published AFTER the handler's write is durable
        - Subscribers receive the event object itself, never the entity
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
