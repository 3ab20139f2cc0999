"""In-memory product repository.

Dict-backed implementation of the ProductRepository protocol.
No external dependencies - used for tests, development and the default
``memory`` storage backend. Data is lost on restart.
"""

from dataclasses import replace
from uuid import UUID

from product_catalog.core.errors import StorageError
from product_catalog.domain.entities.product import Product


class InMemoryProductRepository:
    """In-memory dict storage.

    Products are stored and returned as copies, so an entity a handler
    mutates never changes stored state until it is passed to update().
    Dict insertion order gives creation order for get_all().

    Note:
        Not suitable for multiple processes. Use SqlProductRepository for
        durable storage.
    """

    def __init__(self) -> None:
        """Initialize in-memory storage."""
        self._products: dict[UUID, Product] = {}

    async def add(self, product: Product) -> None:
        """Store a new product.

        Raises:
            StorageError: If a product with the same id already exists.
        """
        if product.id in self._products:
            raise StorageError("add", f"Product {product.id} already exists")
        self._products[product.id] = replace(product)

    async def get_by_id(self, product_id: UUID) -> Product | None:
        """Return a copy of the product, or None if absent."""
        product = self._products.get(product_id)
        return replace(product) if product is not None else None

    async def get_all(self) -> list[Product]:
        """Return copies of every product in insertion order."""
        return [replace(p) for p in self._products.values()]

    async def update(self, product: Product) -> None:
        """Replace stored state of an existing product.

        Raises:
            StorageError: If the product does not exist.
        """
        if product.id not in self._products:
            raise StorageError("update", f"Product {product.id} does not exist")
        self._products[product.id] = replace(product)

    async def delete(self, product_id: UUID) -> None:
        """Remove product (no-op if absent)."""
        self._products.pop(product_id, None)
