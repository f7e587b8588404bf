"""
Amount Words Renderer
English words for integers from 0 to 999,999.

Tokens are uppercase; casing for display is applied by the converter.
"""

from typing import List

MAX_RENDERABLE = 999_999

ONES = [
    "",
    "ONE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
]

TEENS = [
    "TEN",
    "ELEVEN",
    "TWELVE",
    "THIRTEEN",
    "FOURTEEN",
    "FIFTEEN",
    "SIXTEEN",
    "SEVENTEEN",
    "EIGHTEEN",
    "NINETEEN",
]

# No word for 0 or 1 in the tens slot
TENS = [
    "",
    "",
    "TWENTY",
    "THIRTY",
    "FORTY",
    "FIFTY",
    "SIXTY",
    "SEVENTY",
    "EIGHTY",
    "NINETY",
]


def _hundreds_tokens(number: int) -> List[str]:
    """Tokens for 0-999. Zero renders as no tokens."""
    tokens = []

    if number >= 100:
        tokens.append(ONES[number // 100])
        tokens.append("HUNDRED")
        number %= 100

    if number >= 20:
        tokens.append(TENS[number // 10])
        if number % 10:
            tokens.append(ONES[number % 10])
    elif number >= 10:
        tokens.append(TEENS[number - 10])
    elif number > 0:
        tokens.append(ONES[number])

    return tokens


def number_to_tokens(number: int) -> List[str]:
    """
    Render an integer as a list of uppercase word tokens.

    Raises:
        ValueError: If number is not an integer in [0, 999999]
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"Expected an integer, got {type(number).__name__}")
    if number < 0 or number > MAX_RENDERABLE:
        raise ValueError(f"{number} is outside the renderable range 0-{MAX_RENDERABLE}")

    if number == 0:
        return ["ZERO"]

    tokens = []
    thousands, remainder = divmod(number, 1000)

    if thousands:
        tokens.extend(_hundreds_tokens(thousands))
        tokens.append("THOUSAND")

    if remainder:
        tokens.extend(_hundreds_tokens(remainder))

    return [token for token in tokens if token]


def number_to_words(number: int) -> str:
    """Render an integer in [0, 999999] as space-separated uppercase words."""
    return " ".join(number_to_tokens(number))
