from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator, Optional, Tuple, Union

from ..money import ZERO, parse_money

D = Decimal

Amount = Union[str, D]


@dataclass(frozen=True)
class DeliveryRuleTier:
    """
    Amount range -> delivery charge.
    min_amount is inclusive, max_amount exclusive (None = no upper bound).
    """

    min_amount: Amount
    max_amount: Optional[Amount]
    charge: Amount

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_amount", parse_money(self.min_amount))
        if self.max_amount is not None:
            object.__setattr__(self, "max_amount", parse_money(self.max_amount))
            if self.max_amount <= self.min_amount:
                raise ValueError(
                    f"Tier max_amount must be greater than min_amount: "
                    f"{self.min_amount} >= {self.max_amount}"
                )
        object.__setattr__(self, "charge", parse_money(self.charge))

    def matches(self, amount: D) -> bool:
        if amount < self.min_amount:
            return False
        return self.max_amount is None or amount < self.max_amount


class DeliveryRuleTable:
    """
    Ordered delivery tiers, resolved first-match top-down.

    The order is part of the data: the default table lists the highest
    threshold first. Keep it that way when editing tiers.
    """

    def __init__(self, tiers: Iterable[DeliveryRuleTier]):
        self._tiers: Tuple[DeliveryRuleTier, ...] = tuple(tiers)

    @property
    def tiers(self) -> Tuple[DeliveryRuleTier, ...]:
        return self._tiers

    def resolve(self, net_amount: D) -> D:
        for tier in self._tiers:
            if tier.matches(net_amount):
                return tier.charge
        return ZERO

    def __iter__(self) -> Iterator[DeliveryRuleTier]:
        return iter(self._tiers)

    def __len__(self) -> int:
        return len(self._tiers)


DEFAULT_DELIVERY_RULES = DeliveryRuleTable(
    [
        DeliveryRuleTier(min_amount="90", max_amount=None, charge="0"),
        DeliveryRuleTier(min_amount="50", max_amount="90", charge="2.95"),
        DeliveryRuleTier(min_amount="0", max_amount="50", charge="4.95"),
    ]
)
