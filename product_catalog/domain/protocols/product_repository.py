"""ProductRepository protocol for product persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol (in-memory, SQLAlchemy).

Contract:
    - get_by_id returns None for a missing id; it never fails for absence.
      Handlers turn absence into NotFoundError when they need existence.
    - add/update/delete are durable before they return.
    - Adapter failures raise StorageError.
    - Returned Product instances are detached copies; mutating one has no
      effect until it is passed back to update().
"""

from typing import Protocol
from uuid import UUID

from product_catalog.domain.entities.product import Product


class ProductRepository(Protocol):
    """Product repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        add: Persist a new product
        get_by_id: Retrieve product by ID (None if absent)
        get_all: Retrieve all products in a stable order
        update: Persist changes to an existing product
        delete: Remove product by ID
    """

    async def add(self, product: Product) -> None:
        """Persist a new product.

        Args:
            product: Product to store.

        Raises:
            StorageError: If the write fails (including duplicate id).
        """
        ...

    async def get_by_id(self, product_id: UUID) -> Product | None:
        """Find product by ID.

        Args:
            product_id: Product's unique identifier.

        Returns:
            Product if found, None otherwise.

        Example:
            >>> product = await repo.get_by_id(product_id)
            >>> if product:
            ...     print(product.name)
        """
        ...

    async def get_all(self) -> list[Product]:
        """List every product.

        Returns:
            Products ordered by creation (stable across calls without writes).
        """
        ...

    async def update(self, product: Product) -> None:
        """Persist name/price changes of an existing product.

        Args:
            product: Product carrying the new state.

        Raises:
            StorageError: If the write fails or the product no longer exists.
        """
        ...

    async def delete(self, product_id: UUID) -> None:
        """Remove product by ID (no-op if already absent).

        Args:
            product_id: Product to remove.

        Raises:
            StorageError: If the write fails.
        """
        ...
