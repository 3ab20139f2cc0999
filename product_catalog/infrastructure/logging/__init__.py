"""Logging adapters implementing LoggerProtocol."""

from product_catalog.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
