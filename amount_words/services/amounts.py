"""
Amount Words Amounts Service
Splits a decimal amount into whole units and sub-units.

Sub-units are rounded half-to-even; a rounded value of 100 carries
into the whole part.
"""

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_EVEN
from dataclasses import dataclass
from typing import Tuple, Union

SUB_UNITS_PER_UNIT = 100

AmountLike = Union[Decimal, int, float, str]


def to_decimal(amount: AmountLike) -> Decimal:
    """
    Coerce an amount to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than
    its binary expansion.
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise TypeError("Amount must be a number, not a boolean")
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def split_amount(amount: AmountLike) -> Tuple[int, int]:
    """
    Split an amount into (whole_part, sub_part).

    The sign is dropped. sub_part is always in [0, 99].
    """
    abs_value = abs(to_decimal(amount))
    whole = abs_value.to_integral_value(rounding=ROUND_FLOOR)

    fractional = ((abs_value - whole) * SUB_UNITS_PER_UNIT).quantize(
        Decimal('1'), rounding=ROUND_HALF_EVEN
    )
    whole_part = int(whole)
    sub_part = int(fractional)

    if sub_part >= SUB_UNITS_PER_UNIT:
        whole_part += sub_part // SUB_UNITS_PER_UNIT
        sub_part %= SUB_UNITS_PER_UNIT

    return whole_part, sub_part


@dataclass(frozen=True)
class MonetaryAmount:
    """An amount resolved into whole units and sub-units."""
    value: Decimal
    whole_part: int
    sub_part: int

    @classmethod
    def from_value(cls, amount: AmountLike) -> 'MonetaryAmount':
        value = to_decimal(amount)
        whole_part, sub_part = split_amount(value)
        return cls(value=value, whole_part=whole_part, sub_part=sub_part)
