"""Validation engine for request rule sets.

A rule set is an ordered list of predicate + message pairs over the fields
of one request type. The engine runs every rule (no short-circuit) and
returns either the request unchanged or a ValidationError listing every
violation in declaration order. Rules are pure; they never perform I/O.

Validation is opt-in per request type: a request without a registered rule
set always passes.

Usage:
    from product_catalog.core.validation import RuleSet, greater_than, not_blank

    rules = RuleSet(
        request_type=CreateProduct,
        rules=(not_blank("name"), greater_than("price", 0)),
    )
    registry = ValidatorRegistry()
    registry.register(rules)

    result = registry.validate(CreateProduct(name="", price=Decimal("-1")))
    # Failure(error=ValidationError(violations=(name..., price...)))
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeAlias, TypeVar
from uuid import UUID

from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import (
    ConfigurationError,
    FieldViolation,
    ValidationError,
)
from product_catalog.core.result import Failure, Result, Success

# Message is either a fixed string or built from the offending value
RuleMessage: TypeAlias = str | Callable[[Any], str]

R = TypeVar("R")

NIL_UUID = UUID(int=0)


@dataclass(frozen=True, kw_only=True)
class ValidationRule:
    """Single predicate over one request field.

    Attributes:
        field: Request attribute the rule reads.
        predicate: Pure function of the field value, True when valid.
        message: Failure message, or callable building it from the value.
    """

    field: str
    predicate: Callable[[Any], bool]
    message: RuleMessage

    def check(self, request: object) -> FieldViolation | None:
        """Evaluate the rule against a request.

        Args:
            request: Request value holding ``field``.

        Returns:
            FieldViolation if the predicate fails, None otherwise.
        """
        value = getattr(request, self.field, None)
        if self.predicate(value):
            return None
        message = self.message(value) if callable(self.message) else self.message
        return FieldViolation(field=self.field, message=message)


@dataclass(frozen=True, kw_only=True)
class RuleSet:
    """Ordered rules for one request type.

    Attributes:
        request_type: Request class the rules apply to.
        rules: Rules, evaluated in order.
    """

    request_type: type
    rules: tuple[ValidationRule, ...]

    def evaluate(self, request: object) -> tuple[FieldViolation, ...]:
        """Run every rule and collect all violations.

        Args:
            request: Request instance of ``request_type``.

        Returns:
            Violations in rule declaration order (empty when valid).
        """
        violations = (rule.check(request) for rule in self.rules)
        return tuple(v for v in violations if v is not None)


class ValidatorRegistry:
    """Request type -> RuleSet mapping, built once at startup."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._rule_sets: dict[type, RuleSet] = {}

    def register(self, rule_set: RuleSet) -> None:
        """Register the rule set for its request type.

        Args:
            rule_set: Rules to attach.

        Raises:
            ConfigurationError: If the request type already has rules.
        """
        if rule_set.request_type in self._rule_sets:
            raise ConfigurationError(
                f"Validation rules already registered for "
                f"{rule_set.request_type.__name__}"
            )
        self._rule_sets[rule_set.request_type] = rule_set

    def rules_for(self, request_type: type) -> RuleSet | None:
        """Return the rule set for a request type, if any."""
        return self._rule_sets.get(request_type)

    def validate(self, request: R) -> Result[R, ValidationError]:
        """Validate a request against its registered rule set.

        Args:
            request: Any request value.

        Returns:
            Success with the request if valid (or no rules registered),
            Failure with ValidationError listing every violation otherwise.
        """
        rule_set = self._rule_sets.get(type(request))
        if rule_set is None:
            return Success(value=request)

        violations = rule_set.evaluate(request)
        if not violations:
            return Success(value=request)

        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=" ".join(v.message for v in violations),
                field=violations[0].field,
                violations=violations,
            )
        )


# =============================================================================
# Rule builders
# =============================================================================


def field_label(field: str) -> str:
    """Human label for a field name ("product_id" -> "Product Id")."""
    return " ".join(part.capitalize() for part in field.split("_"))


def not_blank(field: str, label: str | None = None) -> ValidationRule:
    """Field must be a string with non-whitespace content."""
    label = label or field_label(field)
    return ValidationRule(
        field=field,
        predicate=lambda v: isinstance(v, str) and bool(v.strip()),
        message=f"'{label}' must not be empty.",
    )


def max_length(field: str, limit: int, label: str | None = None) -> ValidationRule:
    """String length must not exceed ``limit`` (non-strings are left to other rules)."""
    label = label or field_label(field)
    return ValidationRule(
        field=field,
        predicate=lambda v: not isinstance(v, str) or len(v) <= limit,
        message=lambda v: (
            f"The length of '{label}' must be {limit} characters or fewer. "
            f"You entered {len(v)} characters."
        ),
    )


def is_finite_number(value: Any) -> bool:
    """True for int, float and Decimal values other than NaN and infinities."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def decimal_shape(value: Decimal | int | float) -> tuple[int, int]:
    """Return (integer digits, decimal places) of a finite number.

    Trailing fractional zeros do not count: Decimal("120.50") -> (3, 1).
    """
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    _, digits, exponent = number.as_tuple()
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1
    return max(0, len(digits) + exponent), max(0, -exponent)


def greater_than(field: str, bound: Any, label: str | None = None) -> ValidationRule:
    """Field must be a finite number strictly greater than ``bound``."""
    label = label or field_label(field)
    return ValidationRule(
        field=field,
        predicate=lambda v: is_finite_number(v) and v > bound,
        message=f"'{label}' must be greater than '{bound}'.",
    )


def precision_scale(
    field: str, max_digits: int, decimal_places: int, label: str | None = None
) -> ValidationRule:
    """Number must fit ``max_digits`` digits with at most ``decimal_places`` decimals.

    Matches a SQL ``Numeric(max_digits, decimal_places)`` column, so accepted
    values round-trip exactly. Non-numbers and non-finite values are left to
    other rules.
    """
    label = label or field_label(field)
    max_integer_digits = max_digits - decimal_places

    def _fits(value: Any) -> bool:
        if not is_finite_number(value):
            return True
        integer_digits, scale = decimal_shape(value)
        return integer_digits <= max_integer_digits and scale <= decimal_places

    def _message(value: Any) -> str:
        integer_digits, scale = decimal_shape(value)
        return (
            f"'{label}' must not be more than {max_digits} digits in total, "
            f"with allowance for {decimal_places} decimals. "
            f"{integer_digits + scale} digits and {scale} decimals were found."
        )

    return ValidationRule(field=field, predicate=_fits, message=_message)


def not_default(field: str, label: str | None = None) -> ValidationRule:
    """Identifier must be set: not None, not the nil UUID, not blank."""
    label = label or field_label(field)

    def _is_set(value: Any) -> bool:
        if value is None or value == NIL_UUID:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True

    return ValidationRule(
        field=field,
        predicate=_is_set,
        message=f"'{label}' must not be empty.",
    )
