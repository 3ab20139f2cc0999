"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from product_catalog.core.errors import DomainError, ValidationError, NotFoundError
"""

from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors.common_errors import (
    CancelledError,
    FieldViolation,
    NotFoundError,
    SubscriberError,
    SubscriberFailure,
    ValidationError,
)
from product_catalog.core.errors.domain_error import DomainError
from product_catalog.core.errors.system_errors import ConfigurationError, StorageError

__all__ = [
    "ErrorCode",
    "DomainError",
    "ValidationError",
    "FieldViolation",
    "NotFoundError",
    "CancelledError",
    "SubscriberError",
    "SubscriberFailure",
    "ConfigurationError",
    "StorageError",
]
