"""Unit tests for LoggingEventHandler."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from uuid_extensions import uuid7

from product_catalog.domain.events.product_events import (
    ProductCreated,
    ProductDeleted,
    ProductUpdated,
)
from product_catalog.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from product_catalog.infrastructure.events.in_memory_publisher import (
    InMemoryNotificationPublisher,
)


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured logging of product events."""

    @pytest.mark.asyncio
    async def test_product_created_logged_at_info(self):
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)
        event = ProductCreated(product_id=uuid7(), name="Laptop", price=Decimal("9.50"))

        await handler.handle_product_created(event)

        mock_logger.info.assert_called_once_with(
            "product_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            product_id=str(event.product_id),
            name="Laptop",
            price="9.50",
        )

    @pytest.mark.asyncio
    async def test_product_updated_logged_at_info(self):
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)
        event = ProductUpdated(product_id=uuid7(), name="Desk", price=Decimal("10"))

        await handler.handle_product_updated(event)

        assert mock_logger.info.call_args.args[0] == "product_updated"
        assert mock_logger.info.call_args.kwargs["product_id"] == str(event.product_id)

    @pytest.mark.asyncio
    async def test_product_deleted_logged_at_info(self):
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)
        event = ProductDeleted(product_id=uuid7())

        await handler.handle_product_deleted(event)

        assert mock_logger.info.call_args.args[0] == "product_deleted"

    def test_register_subscribes_every_product_event(self):
        mock_logger = MagicMock()
        publisher = InMemoryNotificationPublisher(logger=mock_logger)

        LoggingEventHandler(logger=mock_logger).register(publisher)

        for event_type in (ProductCreated, ProductUpdated, ProductDeleted):
            assert publisher.subscriber_count(event_type) == 1
