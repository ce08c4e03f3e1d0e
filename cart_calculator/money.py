from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Any

from .errors import InvalidPriceError

D = Decimal

ZERO = D("0")
CENT = D("0.01")


def parse_money(value: Any) -> D:
    """
    Exact money parsing.

    Accepts a decimal string ("32.95") or a Decimal instance; floats and
    every other type raise InvalidPriceError.
    """
    if isinstance(value, D):
        amount = value
    elif isinstance(value, str):
        try:
            amount = D(value.strip())
        except InvalidOperation:
            raise InvalidPriceError(value, f"Price is not a decimal number: {value!r}") from None
    else:
        raise InvalidPriceError(value)

    if not amount.is_finite():
        raise InvalidPriceError(value, f"Price must be finite: {value!r}")
    if amount < ZERO:
        raise InvalidPriceError(value, f"Price must not be negative: {value!r}")
    return amount


def round_cent(amount: D) -> D:
    """
    Truncate to whole cents (toward zero), so 54.375 -> 54.37.

    NB: this is not round-half-up. Totals are pinned on this behaviour.
    """
    return amount.quantize(CENT, rounding=ROUND_DOWN)
