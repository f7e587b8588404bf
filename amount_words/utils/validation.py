"""
Amount Words Input Validation
Parses free-form text into a bounded, non-negative currency amount.

Only plain decimal notation is accepted: no currency symbols, thousands
separators, exponents or surrounding whitespace.
"""

import re
from decimal import Decimal, InvalidOperation
from dataclasses import dataclass
from typing import Optional

MIN_VALUE = Decimal('0')
MAX_VALUE = Decimal('999999.99')
MAX_DECIMAL_PLACES = 2

_AMOUNT_PATTERN = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)')


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error_message: Optional[str] = None
    parsed_value: Optional[Decimal] = None

    @classmethod
    def success(cls, value: Decimal) -> 'ValidationResult':
        return cls(is_valid=True, parsed_value=value)

    @classmethod
    def failure(cls, message: str) -> 'ValidationResult':
        return cls(is_valid=False, error_message=message)


def count_decimal_places(text: str) -> int:
    """Digits after the decimal point as written, trailing zeros included."""
    if '.' not in text:
        return 0
    return len(text.split('.', 1)[1])


def validate_currency_input(text: Optional[str]) -> ValidationResult:
    """
    Validate raw user input as a currency amount.

    Returns:
        ValidationResult with parsed_value set on success, or a
        message suitable for direct display on failure
    """
    if text is None or not text.strip():
        return ValidationResult.failure("Input cannot be empty")

    if not _AMOUNT_PATTERN.fullmatch(text):
        return ValidationResult.failure("Invalid number format")

    try:
        value = Decimal(text)
    except InvalidOperation:
        return ValidationResult.failure("Invalid number format")

    if count_decimal_places(text) > MAX_DECIMAL_PLACES:
        return ValidationResult.failure(
            "Currency values cannot have more than 2 decimal places"
        )

    if value < MIN_VALUE:
        return ValidationResult.failure("Negative numbers are not currently supported")

    if value > MAX_VALUE:
        return ValidationResult.failure(
            f"Value must be between {MIN_VALUE} and {MAX_VALUE}"
        )

    return ValidationResult.success(value)
