"""Product domain entity.

The catalog's only aggregate: a named, priced product.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Identity assigned once at construction (uuid7), never reassigned
    - Invariants (non-blank name, bounded length, positive finite price of
      at most 10 integer digits and 2 decimals) hold at every observable
      state; violations raise ValueError because callers validate requests
      first, so reaching them is a programming error
    - NO domain events here (handlers produce notifications)

Usage:
    from decimal import Decimal
    from product_catalog.domain.entities import Product

    product = Product.create(name="Laptop", price=Decimal("999.99"))
    product.update(name="Laptop Pro", price=Decimal("1299.00"))
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from product_catalog.core.validation import decimal_shape, is_finite_number
from product_catalog.domain.errors.product_error import (
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_PRICE_DECIMAL_PLACES,
    PRODUCT_PRICE_MAX_DIGITS,
    ProductError,
)


@dataclass
class Product:
    """Catalog product.

    Financial Precision:
        Prices are Decimal. Never store money as float.

    Attributes:
        id: Unique product identifier (immutable).
        name: Display name (1-100 characters, not blank).
        price: Unit price, strictly positive, at most 2 decimal places.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> product = Product.create(name="Laptop", price=Decimal("999.99"))
        >>> product.id = uuid7()
        AttributeError: Product id cannot be reassigned
    """

    id: UUID
    name: str
    price: Decimal

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate product after initialization.

        Raises:
            ValueError: If name or price violate product invariants.
        """
        self._check_invariants(self.name, self.price)

    def __setattr__(self, name: str, value: Any) -> None:
        """Block reassignment of the identity field."""
        if name == "id" and "id" in self.__dict__:
            raise AttributeError(ProductError.PRODUCT_ID_IMMUTABLE)
        super().__setattr__(name, value)

    @classmethod
    def create(cls, *, name: str, price: Decimal) -> "Product":
        """Construct a new product with a freshly generated id.

        Args:
            name: Product name.
            price: Product price.

        Returns:
            New Product (not yet persisted).
        """
        return cls(id=uuid7(), name=name, price=price)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def update(self, *, name: str, price: Decimal) -> None:
        """Replace name and price in place; id is untouched.

        Raises:
            ValueError: If the new values violate product invariants.
        """
        self._check_invariants(name, price)
        self.name = name
        self.price = price
        self.updated_at = datetime.now(UTC)

    @staticmethod
    def _check_invariants(name: str, price: Decimal) -> None:
        if not name or not name.strip():
            raise ValueError(ProductError.INVALID_PRODUCT_NAME)
        if len(name) > PRODUCT_NAME_MAX_LENGTH:
            raise ValueError(ProductError.PRODUCT_NAME_TOO_LONG)
        if not is_finite_number(price) or price <= 0:
            raise ValueError(ProductError.INVALID_PRODUCT_PRICE)
        integer_digits, scale = decimal_shape(price)
        if (
            scale > PRODUCT_PRICE_DECIMAL_PLACES
            or integer_digits > PRODUCT_PRICE_MAX_DIGITS - PRODUCT_PRICE_DECIMAL_PLACES
        ):
            raise ValueError(ProductError.PRODUCT_PRICE_PRECISION_EXCEEDED)
