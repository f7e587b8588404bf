"""
Amount Words Utils Package
Input validation and request helpers.
"""

from amount_words.utils.validation import (
    validate_currency_input,
    count_decimal_places,
    ValidationResult,
    MIN_VALUE,
    MAX_VALUE,
    MAX_DECIMAL_PLACES,
)

from amount_words.utils.request_ids import generate_request_id

__all__ = [
    # Validation
    'validate_currency_input',
    'count_decimal_places',
    'ValidationResult',
    'MIN_VALUE',
    'MAX_VALUE',
    'MAX_DECIMAL_PLACES',
    # Requests
    'generate_request_id',
]
