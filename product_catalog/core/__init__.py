"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Validation engine for declarative request rules
- Cooperative cancellation signal

The core module has NO dependencies on other application layers.
"""

from product_catalog.core.cancellation import CancellationToken, OperationCancelled
from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import (
    CancelledError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    StorageError,
    SubscriberError,
    ValidationError,
)
from product_catalog.core.result import Failure, Result, Success

__all__ = [
    "CancellationToken",
    "CancelledError",
    "ConfigurationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "OperationCancelled",
    "Result",
    "StorageError",
    "SubscriberError",
    "Success",
    "ValidationError",
]
