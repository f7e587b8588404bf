"""
Amount Words Services Package
Conversion engine and orchestration.
"""

from amount_words.services.amounts import (
    MonetaryAmount,
    split_amount,
    to_decimal,
)

from amount_words.services.words import (
    number_to_tokens,
    number_to_words,
    MAX_RENDERABLE,
)

from amount_words.services.converter import (
    CapitalizationStyle,
    ConversionOptions,
    InvalidOptions,
    RangeViolation,
    NotSupportedRange,
    WordsResult,
    UnsupportedRangeError,
    MIN_AMOUNT,
    MAX_AMOUNT,
    apply_capitalization,
    check_range,
    compose_phrase,
    convert,
    convert_or_raise,
)

from amount_words.services.conversion import (
    ConversionResult,
    ConversionService,
    get_conversion_service,
    init_conversion_service,
    options_from_payload,
)
