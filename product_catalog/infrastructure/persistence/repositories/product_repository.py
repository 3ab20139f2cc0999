"""Product repository implementation.

SQLAlchemy implementation of the ProductRepository protocol.
Maps between Product domain entity and ProductModel database model.

Each operation opens its own session through ``Database.get_session()``,
which commits on exit, so every write is durable when the call returns.
Driver errors are wrapped in StorageError.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from product_catalog.core.errors import StorageError
from product_catalog.domain.entities.product import Product
from product_catalog.infrastructure.persistence.database import Database
from product_catalog.infrastructure.persistence.models.product import ProductModel


class SqlProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol.

    **Implementation Notes**:
    - Maps between domain entity (dataclass) and database model (SQLAlchemy)
    - Uses select() for queries (SQLAlchemy 2.0 style)
    - Listing order is (created_at, id); uuid7 ids break timestamp ties
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with database.

        Args:
            database: Database providing transactional sessions.
        """
        self._database = database

    async def add(self, product: Product) -> None:
        """Insert a new product.

        Raises:
            StorageError: On any driver error (including duplicate id).
        """
        try:
            async with self._database.get_session() as session:
                session.add(self._to_model(product))
        except SQLAlchemyError as e:
            raise StorageError("add", f"Could not insert product {product.id}", e) from e

    async def get_by_id(self, product_id: UUID) -> Product | None:
        """Find product by ID.

        Args:
            product_id: Product's unique identifier.

        Returns:
            Product entity if found, None otherwise.
        """
        try:
            async with self._database.get_session() as session:
                stmt = select(ProductModel).where(ProductModel.id == product_id)
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("get_by_id", f"Could not load product {product_id}", e) from e

        if model is None:
            return None

        return self._to_entity(model)

    async def get_all(self) -> list[Product]:
        """List all products ordered by creation."""
        try:
            async with self._database.get_session() as session:
                stmt = select(ProductModel).order_by(
                    ProductModel.created_at, ProductModel.id
                )
                result = await session.execute(stmt)
                models = result.scalars().all()
        except SQLAlchemyError as e:
            raise StorageError("get_all", "Could not list products", e) from e

        return [self._to_entity(m) for m in models]

    async def update(self, product: Product) -> None:
        """Persist name/price of an existing product.

        Raises:
            StorageError: If the product no longer exists or the write fails.
        """
        try:
            async with self._database.get_session() as session:
                stmt = select(ProductModel).where(ProductModel.id == product.id)
                result = await session.execute(stmt)
                existing = result.scalar_one_or_none()

                if existing is None:
                    raise StorageError(
                        "update", f"Product {product.id} does not exist"
                    )

                existing.name = product.name
                existing.price = product.price
                existing.updated_at = product.updated_at
        except SQLAlchemyError as e:
            raise StorageError("update", f"Could not update product {product.id}", e) from e

    async def delete(self, product_id: UUID) -> None:
        """Remove product by ID (no-op if absent)."""
        try:
            async with self._database.get_session() as session:
                await session.execute(
                    delete(ProductModel).where(ProductModel.id == product_id)
                )
        except SQLAlchemyError as e:
            raise StorageError("delete", f"Could not delete product {product_id}", e) from e

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy ProductModel instance.

        Returns:
            Product domain entity.
        """
        return Product(
            id=model.id,
            name=model.name,
            price=model.price,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, product: Product) -> ProductModel:
        """Convert domain entity to database model.

        Args:
            product: Product domain entity.

        Returns:
            ProductModel for persistence.
        """
        return ProductModel(
            id=product.id,
            name=product.name,
            price=product.price,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on round-trip
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
