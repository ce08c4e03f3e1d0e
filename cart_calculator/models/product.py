from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from ..money import parse_money

D = Decimal


@dataclass(frozen=True)
class Product:
    """
    Catalogue entry. Immutable, shared read-only by every line item that
    references it.

    price must be given as an exact decimal string ("32.95") or a Decimal;
    anything else raises InvalidPriceError.
    """

    code: str
    name: str
    price: Union[str, D]

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", parse_money(self.price))
