from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .product import Product

D = Decimal


class LineItem:
    """
    One product code's running quantity within a cart.
    Starts at 1 and only ever goes up.
    """

    def __init__(self, product: Product):
        self.product = product
        self._quantity = 1

    @property
    def quantity(self) -> int:
        return self._quantity

    def increment_quantity(self) -> int:
        self._quantity += 1
        return self._quantity

    @property
    def subtotal(self) -> D:
        return self.product.price * self._quantity

    def summary(self) -> "LineSummary":
        return LineSummary(
            product=self.product,
            quantity=self._quantity,
            line_subtotal=self.subtotal,
        )

    def __repr__(self) -> str:
        return f"LineItem({self.product.code} x{self._quantity})"


@dataclass(frozen=True)
class LineSummary:
    """Read-only snapshot of a line item, for display."""

    product: Product
    quantity: int
    line_subtotal: D
