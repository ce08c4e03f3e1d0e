from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Union
from uuid import uuid4

from ..engine.discount_policy import DiscountLine, DiscountPolicy, coerce_policy
from ..errors import ProductNotFoundError
from ..logging_config import get_logger
from ..money import ZERO, round_cent
from ..rule_types.base import Rule
from .catalogue import Catalogue
from .delivery_rule import DeliveryRuleTable
from .line_item import LineItem, LineSummary

D = Decimal


@dataclass(frozen=True)
class CartBreakdown:
    """Everything a front-end needs to render an order summary."""

    cart_id: str
    items: Dict[str, LineSummary]
    subtotal: D
    discount: D
    net_amount: D
    delivery_charge: D
    total: D
    discounts: List[DiscountLine] = field(default_factory=list)


class Cart:
    """
    Shopping cart: accumulates product codes and prices them.

    Pricing, in order:
      1. subtotal  = sum of line subtotals
      2. discount  = sum of every discount rule (gated by offers)
      3. delivery  = tier charge for the *net* amount (subtotal - discount)
      4. total     = subtotal - discount + delivery, truncated to the cent

    The cart only changes through add(); every read is side-effect free, so
    total() can be called any number of times. Not safe for concurrent
    mutation; catalogue, delivery rules and discount rules are read-only
    and may be shared between carts.

    Usage:
        cart = Cart(DEFAULT_CATALOGUE, DEFAULT_DELIVERY_RULES, DEFAULT_OFFERS)
        cart.add("B01")
        cart.add("G01")
        cart.total()  # Decimal("37.85")
    """

    def __init__(
        self,
        catalogue: Catalogue,
        delivery_rules: DeliveryRuleTable,
        offers: Mapping[str, bool],
        discount_rules: Optional[Union[DiscountPolicy, Iterable[Rule]]] = None,
        *,
        cart_id: Optional[str] = None,
    ):
        self.catalogue = catalogue
        self.delivery_rules = delivery_rules
        self.offers = dict(offers or {})
        self.discount_rules = coerce_policy(discount_rules)
        self.cart_id = cart_id or uuid4().hex
        self._items: Dict[str, LineItem] = {}
        self._log = get_logger(self.cart_id)

    # -----------------
    # mutation
    # -----------------

    def add(self, code: str) -> None:
        """
        Add one unit of `code`.

        Raises ProductNotFoundError for an unknown code; the cart is left
        untouched in that case.
        """
        product = self.catalogue.lookup(code)
        if product is None:
            self._log.warning("Unknown product code: {}", code)
            raise ProductNotFoundError(code)

        item = self._items.get(code)
        if item is None:
            self._items[code] = LineItem(product)
        else:
            item.increment_quantity()

        self._log.debug("Added {} (qty={})", code, self._items[code].quantity)

    # -----------------
    # reads
    # -----------------

    def items(self) -> Dict[str, LineSummary]:
        """Ordered snapshot code -> LineSummary, in first-added order."""
        return {code: item.summary() for code, item in self._items.items()}

    def subtotal(self) -> D:
        return sum((item.subtotal for item in self._items.values()), ZERO)

    def discount(self) -> D:
        return self.discount_rules.total(self._items, self.offers)

    def delivery_charge(self) -> D:
        return self.delivery_rules.resolve(self.subtotal() - self.discount())

    def total(self) -> D:
        subtotal = self.subtotal()
        discount = self.discount()
        delivery = self.delivery_rules.resolve(subtotal - discount)

        total = round_cent(subtotal - discount + delivery)
        self._log.debug(
            "Priced cart: subtotal={} discount={} delivery={} total={}",
            subtotal,
            discount,
            delivery,
            total,
        )
        return total

    def breakdown(self) -> CartBreakdown:
        subtotal = self.subtotal()
        discounts = self.discount_rules.evaluate(self._items, self.offers)
        discount = sum((d.amount for d in discounts), ZERO)
        net = subtotal - discount
        delivery = self.delivery_rules.resolve(net)

        return CartBreakdown(
            cart_id=self.cart_id,
            items=self.items(),
            subtotal=subtotal,
            discount=discount,
            net_amount=net,
            delivery_charge=delivery,
            total=round_cent(net + delivery),
            discounts=discounts,
        )

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Cart(cart_id={self.cart_id!r}, items={list(self._items.values())!r})"
