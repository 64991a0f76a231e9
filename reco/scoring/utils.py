"""
Decimal Utilities
reco/scoring/utils.py

Provides precision-safe rounding for transformer output.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def round_half_up(value: Union[float, Decimal]) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Unlike the builtin round(), 2.5 -> 3 and -2.5 -> -3.
    to_integral_value() is not bound by the context precision, so results
    wider than 28 digits come back whole.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))
