from __future__ import annotations

from .base import D, Rule, RuleResult, register


@register
class PairedHalfPriceRule(Rule):
    """
    Buy one, get the second half price.

    For every complete pair of units of params["product_code"], one unit
    of the pair is half price:

        discount = floor(qty / 2) * (price / 2)

    A lone unit left over in an odd quantity gets nothing.
    """

    type_name = "paired_half_price"

    def __init__(self, rule_id, title, params=None):
        super().__init__(rule_id, title, params)
        code = self.params.get("product_code")
        if not code:
            raise ValueError(f"Rule {self.rule_id}: params.product_code is required")
        self.product_code = str(code)

    def apply(self, items, offers) -> RuleResult:
        if not self.is_enabled(offers):
            return RuleResult.skipped({"reason": "offer_disabled", "offer": self.offer})

        item = items.get(self.product_code)
        if item is None:
            return RuleResult.skipped(
                {"reason": "product_not_in_cart", "product_code": self.product_code}
            )

        pairs = item.quantity // 2
        if pairs == 0:
            return RuleResult.skipped(
                {"reason": "no_complete_pair", "qty": str(item.quantity)}
            )

        amount = pairs * (item.product.price / D("2"))
        return RuleResult.applied(
            amount,
            {
                "product_code": self.product_code,
                "qty": str(item.quantity),
                "pairs": str(pairs),
                "unit_price": str(item.product.price),
            },
        )
