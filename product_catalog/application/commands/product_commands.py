"""Product commands (CQRS write operations).

Commands represent intent to change catalog state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Rules in application/validators run before any handler sees them
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Create a new product.

    Attributes:
        name: Product name (not blank, at most 100 characters).
        price: Product price (strictly positive).

    Example:
        >>> command = CreateProduct(name="Laptop", price=Decimal("999.99"))
        >>> result = await dispatcher.dispatch(command)
        >>> # Success(value=UUID(...))
    """

    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True)
class UpdateProduct:
    """Replace the name and price of an existing product.

    Attributes:
        product_id: Product to update (must be set).
        name: New name.
        price: New price.

    Example:
        >>> command = UpdateProduct(
        ...     product_id=product_id,
        ...     name="Laptop Pro",
        ...     price=Decimal("1299.00"),
        ... )
        >>> result = await dispatcher.dispatch(command)
    """

    product_id: UUID
    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True)
class DeleteProduct:
    """Remove a product.

    Attributes:
        product_id: Product to delete (must be set).
    """

    product_id: UUID
