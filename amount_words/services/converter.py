"""
Amount Words Converter
Composes the final currency phrase for an amount.

Supported amounts are 0 to 999,999.99. Amounts outside that range are
reported as a NotSupportedRange failure and never produce a partial phrase.
"""

from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from amount_words.services.amounts import MonetaryAmount, AmountLike, to_decimal
from amount_words.services.words import number_to_words

MIN_AMOUNT = Decimal('0')
MAX_AMOUNT = Decimal('999999.99')


class CapitalizationStyle(Enum):
    UPPER = "UPPER"          # ONE HUNDRED DOLLARS
    TITLE = "TITLE"          # One Hundred Dollars
    SENTENCE = "SENTENCE"    # One hundred dollars

    @classmethod
    def parse(cls, text: Optional[str]) -> 'CapitalizationStyle':
        """
        Parse a style name, falling back to UPPER.

        Unrecognized names never raise.
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            return cls.UPPER
        return _STYLE_ALIASES.get(text.strip().lower(), cls.UPPER)

    @classmethod
    def is_known(cls, text: str) -> bool:
        return text.strip().lower() in _STYLE_ALIASES


_STYLE_ALIASES = {
    'upper': CapitalizationStyle.UPPER,
    'allupper': CapitalizationStyle.UPPER,
    'title': CapitalizationStyle.TITLE,
    'titlecase': CapitalizationStyle.TITLE,
    'sentence': CapitalizationStyle.SENTENCE,
    'sentencecase': CapitalizationStyle.SENTENCE,
}


@dataclass(frozen=True)
class ConversionOptions:
    """Per-call formatting options. Unit names are appended verbatim."""
    whole_unit_name: str = "DOLLARS"
    sub_unit_name: str = "CENTS"
    use_connector: bool = True
    style: CapitalizationStyle = CapitalizationStyle.UPPER

    def __post_init__(self):
        object.__setattr__(self, 'style', CapitalizationStyle.parse(self.style))


class InvalidOptions(ValueError):
    """Raised when option values have the wrong shape."""
    pass


class RangeViolation(Enum):
    NEGATIVE = "negative"
    ABOVE_MAXIMUM = "above_maximum"


_RANGE_MESSAGES = {
    RangeViolation.NEGATIVE: "Negative numbers not yet supported",
    RangeViolation.ABOVE_MAXIMUM: "Numbers greater than 999,999.99 not yet supported",
}


@dataclass(frozen=True)
class NotSupportedRange:
    """Amount lies outside the range the converter handles."""
    violation: RangeViolation
    amount: Decimal

    @property
    def message(self) -> str:
        return _RANGE_MESSAGES[self.violation]


@dataclass(frozen=True)
class WordsResult:
    """Either a composed phrase or the reason no phrase was produced."""
    phrase: Optional[str] = None
    failure: Optional[NotSupportedRange] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class UnsupportedRangeError(Exception):
    """Raised by convert_or_raise for amounts outside the supported range."""

    def __init__(self, failure: NotSupportedRange):
        super().__init__(failure.message)
        self.failure = failure


def check_range(amount: AmountLike) -> Optional[NotSupportedRange]:
    """Return the violated bound for amount, or None if it is supported."""
    value = to_decimal(amount)
    if value.is_nan():
        raise ValueError("Amount must be a number")
    if value < MIN_AMOUNT:
        return NotSupportedRange(RangeViolation.NEGATIVE, value)
    if value > MAX_AMOUNT:
        return NotSupportedRange(RangeViolation.ABOVE_MAXIMUM, value)
    return None


def _title_case(text: str) -> str:
    words = text.split(' ')
    return ' '.join(word.capitalize() for word in words)


def _sentence_case(text: str) -> str:
    if not text:
        return text
    # title() keeps one character; upper() may expand it ('ß' -> 'SS')
    return text[:1].title() + text[1:].lower()


def apply_capitalization(text: str, style: CapitalizationStyle) -> str:
    """Final casing pass over an already composed phrase."""
    if style == CapitalizationStyle.TITLE:
        return _title_case(text)
    if style == CapitalizationStyle.SENTENCE:
        return _sentence_case(text)
    return text.upper()


def compose_phrase(money: MonetaryAmount, options: ConversionOptions) -> str:
    """Join whole words, connector and sub-unit words, then apply casing."""
    whole_words = number_to_words(money.whole_part)
    sub_words = number_to_words(money.sub_part)
    connector = " AND " if options.use_connector else " "

    phrase = (
        f"{whole_words} {options.whole_unit_name}"
        f"{connector}"
        f"{sub_words} {options.sub_unit_name}"
    )
    return apply_capitalization(phrase, options.style)


def convert(
    amount: AmountLike,
    options: Optional[ConversionOptions] = None
) -> WordsResult:
    """
    Convert an amount to its currency phrase.

    Args:
        amount: Decimal (or int/str/float) between 0 and 999999.99
        options: Formatting options, defaults when None

    Returns:
        WordsResult with the phrase, or with a NotSupportedRange failure
    """
    options = options or ConversionOptions()

    failure = check_range(amount)
    if failure is not None:
        return WordsResult(failure=failure)

    money = MonetaryAmount.from_value(amount)
    return WordsResult(phrase=compose_phrase(money, options))


def convert_or_raise(
    amount: AmountLike,
    options: Optional[ConversionOptions] = None
) -> str:
    """Like convert(), but raises UnsupportedRangeError instead of returning a failure."""
    result = convert(amount, options)
    if not result.ok:
        raise UnsupportedRangeError(result.failure)
    return result.phrase
