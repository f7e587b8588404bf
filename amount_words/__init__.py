"""
Amount Words
Converts currency amounts (0 to 999,999.99) into English words.

    >>> from amount_words import convert
    >>> convert("123.45").phrase
    'ONE HUNDRED TWENTY THREE DOLLARS AND FORTY FIVE CENTS'
"""

from amount_words.services import (
    MonetaryAmount,
    split_amount,
    number_to_words,
    CapitalizationStyle,
    ConversionOptions,
    InvalidOptions,
    RangeViolation,
    NotSupportedRange,
    WordsResult,
    UnsupportedRangeError,
    convert,
    convert_or_raise,
    ConversionResult,
    ConversionService,
    get_conversion_service,
)
from amount_words.utils import validate_currency_input, ValidationResult

__version__ = "1.0.0"

__all__ = [
    # Engine
    'MonetaryAmount',
    'split_amount',
    'number_to_words',
    'CapitalizationStyle',
    'ConversionOptions',
    'InvalidOptions',
    'RangeViolation',
    'NotSupportedRange',
    'WordsResult',
    'UnsupportedRangeError',
    'convert',
    'convert_or_raise',
    # Orchestration
    'ConversionResult',
    'ConversionService',
    'get_conversion_service',
    'validate_currency_input',
    'ValidationResult',
]
