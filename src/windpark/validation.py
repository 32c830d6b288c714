"""Validation utilities for the wind park."""

from typing import Any, Type

from .exceptions import InvalidArgumentError, ValidationTypeError

class Validator:
    """Base validator class."""

    @staticmethod
    def validate_type(value: Any, expected_type: Type) -> None:
        """Validate value type."""
        if not isinstance(value, expected_type):
            raise ValidationTypeError(
                f"Expected type {expected_type.__name__}, got {type(value).__name__}"
            )

    @staticmethod
    def validate_integer(value: Any) -> None:
        """Validate that value is an integer and not a boolean."""
        if isinstance(value, bool):
            raise ValidationTypeError("Expected type int, got bool")
        Validator.validate_type(value, int)

class ParkValidator(Validator):
    """Validator for park state settings."""

    @staticmethod
    def validate_market_price(price: int) -> None:
        """Validate market price."""
        Validator.validate_integer(price)
        if price < 0:
            raise InvalidArgumentError("Market price must be non-negative.")

    @staticmethod
    def validate_production_target(target: int, max_capacity: int) -> None:
        """Validate production target against the current maximum capacity."""
        Validator.validate_integer(target)
        if target < 0 or target > max_capacity:
            raise InvalidArgumentError(
                f"Production target must be in range [0, {max_capacity}] but is {target}."
            )

    @staticmethod
    def validate_delta(delta: int) -> None:
        """Validate production target delta."""
        Validator.validate_integer(delta)
