"""Unit tests for product request rule sets.

Messages are asserted verbatim: callers display them as-is.
"""

from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from product_catalog.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from product_catalog.core.container import build_validator_registry
from product_catalog.core.result import Failure, Success
from product_catalog.core.validation import NIL_UUID


@pytest.fixture
def validators():
    return build_validator_registry()


def messages(result):
    return [v.message for v in result.error.violations]


@pytest.mark.unit
class TestCreateProductRules:
    """Test CreateProduct validation."""

    def test_valid_command_passes(self, validators):
        result = validators.validate(CreateProduct(name="Laptop", price=Decimal("999.99")))

        assert isinstance(result, Success)

    def test_empty_name_and_negative_price_both_reported(self, validators):
        result = validators.validate(CreateProduct(name="", price=Decimal("-5")))

        assert isinstance(result, Failure)
        assert [v.field for v in result.error.violations] == ["name", "price"]
        assert messages(result) == [
            "'Name' must not be empty.",
            "'Price' must be greater than '0'.",
        ]

    def test_whitespace_name_rejected(self, validators):
        result = validators.validate(CreateProduct(name="   ", price=Decimal("1")))

        assert messages(result) == ["'Name' must not be empty."]

    def test_name_of_100_characters_passes(self, validators):
        result = validators.validate(CreateProduct(name="a" * 100, price=Decimal("1")))

        assert isinstance(result, Success)

    def test_name_of_101_characters_rejected(self, validators):
        result = validators.validate(CreateProduct(name="a" * 101, price=Decimal("1")))

        assert messages(result) == [
            "The length of 'Name' must be 100 characters or fewer. "
            "You entered 101 characters."
        ]

    def test_zero_price_rejected(self, validators):
        result = validators.validate(CreateProduct(name="Pen", price=Decimal("0")))

        assert messages(result) == ["'Price' must be greater than '0'."]

    @pytest.mark.parametrize(
        ("price", "found"),
        [
            ("0.001", "3 digits and 3 decimals"),
            ("999.999", "6 digits and 3 decimals"),
            ("12345678901", "11 digits and 0 decimals"),
        ],
    )
    def test_price_beyond_two_decimals_or_ten_integer_digits_rejected(
        self, validators, price, found
    ):
        result = validators.validate(CreateProduct(name="Pen", price=Decimal(price)))

        assert isinstance(result, Failure)
        assert [v.field for v in result.error.violations] == ["price"]
        assert messages(result) == [
            "'Price' must not be more than 12 digits in total, "
            f"with allowance for 2 decimals. {found} were found."
        ]

    @pytest.mark.parametrize("price", ["9999999999.99", "0.01", "2.500"])
    def test_price_within_column_precision_passes(self, validators, price):
        result = validators.validate(CreateProduct(name="Pen", price=Decimal(price)))

        assert isinstance(result, Success)

    @pytest.mark.parametrize("price", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_price_rejected(self, validators, price):
        result = validators.validate(CreateProduct(name="Pen", price=Decimal(price)))

        assert isinstance(result, Failure)
        assert messages(result) == ["'Price' must be greater than '0'."]


@pytest.mark.unit
class TestUpdateProductRules:
    """Test UpdateProduct validation."""

    def test_valid_command_passes(self, validators):
        command = UpdateProduct(product_id=uuid7(), name="Desk", price=Decimal("10"))

        assert isinstance(validators.validate(command), Success)

    def test_nil_id_rejected_first(self, validators):
        command = UpdateProduct(product_id=NIL_UUID, name="", price=Decimal("10"))

        result = validators.validate(command)

        assert result.error.field == "product_id"
        assert messages(result) == [
            "'Id' must not be empty.",
            "'Name' must not be empty.",
        ]

    def test_price_with_three_decimals_rejected(self, validators):
        command = UpdateProduct(product_id=uuid7(), name="Desk", price=Decimal("10.005"))

        result = validators.validate(command)

        assert isinstance(result, Failure)
        assert [v.field for v in result.error.violations] == ["price"]


@pytest.mark.unit
class TestDeleteProductRules:
    """Test DeleteProduct validation."""

    def test_valid_command_passes(self, validators):
        assert isinstance(validators.validate(DeleteProduct(product_id=uuid7())), Success)

    def test_nil_id_rejected(self, validators):
        result = validators.validate(DeleteProduct(product_id=NIL_UUID))

        assert messages(result) == ["'Id' must not be empty."]
