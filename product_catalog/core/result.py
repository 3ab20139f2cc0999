"""Result types for railway-oriented request handling.

Every handler and the dispatcher return a Result instead of raising for
expected outcomes (validation rejections, missing products, cancellation).
Only programming defects and storage failures are raised as exceptions.

Usage:
    def parse_price(raw: str) -> Result[Decimal, str]:
        if not raw:
            return Failure(error="Price is required")
        return Success(value=Decimal(raw))

    result = parse_price("9.99")
    match result:
        case Success(value=price):
            print(f"Price: {price}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
