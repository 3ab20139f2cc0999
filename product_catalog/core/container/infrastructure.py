"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Database (SQLAlchemy async engine)
- Product repository (memory or database backend)

Also provides ``catalog_lifespan()``, the startup/shutdown hook a host
application wraps around its lifetime.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import TYPE_CHECKING

from product_catalog.core.config import get_settings

if TYPE_CHECKING:
    from product_catalog.domain.protocols.logger_protocol import LoggerProtocol
    from product_catalog.domain.protocols.product_repository import ProductRepository
    from product_catalog.infrastructure.persistence.database import Database


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Every log line carries the configured app name and environment.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from product_catalog.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    adapter = ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
    return adapter.bind(app=settings.app_name, environment=settings.environment.value)


@lru_cache()
def get_database() -> "Database":
    """Get database manager singleton (app-scoped).

    Returns:
        Database instance bound to ``settings.database_url``.

    Usage:
        db = get_database()
        async with db.get_session() as session:
            ...
    """
    from product_catalog.infrastructure.persistence.database import Database

    settings = get_settings()
    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_product_repository() -> "ProductRepository":
    """Get product repository singleton (app-scoped).

    Container owns factory logic - decides which adapter based on
    ``settings.storage_backend``:
        - 'memory': InMemoryProductRepository (development, tests)
        - 'database': SqlProductRepository over get_database()

    Returns:
        Repository implementing ProductRepository.
    """
    settings = get_settings()

    if settings.uses_database:
        from product_catalog.infrastructure.persistence.repositories.product_repository import (
            SqlProductRepository,
        )

        return SqlProductRepository(database=get_database())

    from product_catalog.infrastructure.persistence.repositories.in_memory_product_repository import (
        InMemoryProductRepository,
    )

    return InMemoryProductRepository()


@asynccontextmanager
async def catalog_lifespan() -> AsyncGenerator[None, None]:
    """Startup/shutdown hook for host applications.

    Startup: create tables when the database backend is configured.
    Shutdown: dispose the engine.

    Usage:
        async with catalog_lifespan():
            catalog = get_product_catalog()
            ...
    """
    settings = get_settings()
    logger = get_logger()

    if settings.uses_database:
        await get_database().create_all()
    logger.info("catalog_started", storage_backend=settings.storage_backend)

    try:
        yield
    finally:
        if settings.uses_database:
            await get_database().close()
        logger.info("catalog_stopped")
