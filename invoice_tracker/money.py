# invoice_tracker/money.py
"""
Conversion between the fixed-precision storage form of an amount
(Decimal, 2 places) and the numeric form used by callers (float).
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENTS = Decimal("0.01")
MAX_AMOUNT = Decimal("99999999.99")  # numeric(10, 2)


def to_storage(amount: Union[float, int, Decimal]) -> Decimal:
    # str() of a float is its shortest round-tripping repr, so 1250.75 -> "1250.75"
    if isinstance(amount, Decimal):
        value = amount
    else:
        value = Decimal(str(amount))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def from_storage(value: Union[Decimal, str]) -> float:
    return float(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))
