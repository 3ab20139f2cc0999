"""Async SQLAlchemy engine and sessions for the product tables.

SqlProductRepository opens one ``get_session()`` per operation; the session
commits when the block exits, so each repository write is durable on return.
``create_all()`` builds the schema for local runs and tests.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from product_catalog.infrastructure.persistence.base import BaseModel


class Database:
    """Engine plus session factory bound to one database URL.

    Pool options apply to server databases only; SQLite uses the driver default.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Database connection URL (e.g., sqlite+aiosqlite:///...)
            echo: If True, log all SQL statements (useful for debugging)
            pool_size: Connections kept in the pool (ignored for SQLite)
            max_overflow: Overflow connections above pool_size (ignored for SQLite)
        """
        engine_kwargs: dict[str, Any] = {"echo": echo}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
            )

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session that commits on success and rolls back on error."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create the product tables if missing (no migrations)."""
        # Register every model on the metadata before creating tables
        import product_catalog.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop the product tables. Deletes all data."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        await self.engine.dispose()
