from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..money import ZERO
from ..rule_types.base import Rule, rule_registry

D = Decimal


@dataclass(frozen=True)
class RuleSpec:
    id: str
    type: str
    title: str
    params: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "RuleSpec":
        return RuleSpec(
            id=str(d["id"]),
            type=str(d["type"]),
            title=str(d.get("title") or d["id"]),
            params=dict(d.get("params") or {}),
        )


@dataclass(frozen=True)
class DiscountLine:
    """One evaluated rule, as shown in a cart breakdown."""

    rule_id: str
    rule_type: str
    title: str
    decision: str  # "APPLIED" | "SKIPPED"
    amount: D
    meta: Dict[str, Any] = field(default_factory=dict)


class DiscountPolicy:
    """
    Ordered set of independently evaluated discount rules.

    Rules never see each other's results; the cart discount is the plain
    sum of every rule's amount. Adding a promotion means registering a new
    rule type and listing it here, Cart itself stays untouched.
    """

    def __init__(self, rules: Iterable[Rule]):
        self._rules: Tuple[Rule, ...] = tuple(rules)

        ids = [r.rule_id for r in self._rules]
        if len(ids) != len(set(ids)):
            seen, dups = set(), []
            for rid in ids:
                if rid in seen and rid not in dups:
                    dups.append(rid)
                seen.add(rid)
            raise ValueError(f"Duplicate rule ids in discount policy: {dups}")

    @classmethod
    def from_specs(cls, specs: Iterable[Dict[str, Any]]) -> "DiscountPolicy":
        rules: List[Rule] = []
        for raw in specs:
            spec = RuleSpec.from_dict(raw)
            rule_cls = rule_registry.get(spec.type)
            if rule_cls is None:
                raise ValueError(f"Unknown rule type: {spec.type} (rule {spec.id})")
            rules.append(rule_cls(rule_id=spec.id, title=spec.title, params=spec.params))
        return cls(rules)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def evaluate(self, items: Mapping[str, Any], offers: Mapping[str, bool]) -> List[DiscountLine]:
        out: List[DiscountLine] = []
        for rule in self._rules:
            result = rule.apply(items, offers)
            out.append(
                DiscountLine(
                    rule_id=rule.rule_id,
                    rule_type=rule.type_name,
                    title=rule.title,
                    decision=result.decision,
                    amount=result.amount,
                    meta=dict(result.meta),
                )
            )
        return out

    def total(self, items: Mapping[str, Any], offers: Mapping[str, bool]) -> D:
        return sum((line.amount for line in self.evaluate(items, offers)), ZERO)

    def __len__(self) -> int:
        return len(self._rules)


DEFAULT_OFFERS: Mapping[str, bool] = MappingProxyType({"red_widget_half_price": True})

DEFAULT_DISCOUNT_RULES = DiscountPolicy.from_specs(
    [
        {
            "id": "red_widget_half_price",
            "type": "paired_half_price",
            "title": "Buy one red widget, get the second half price",
            "params": {"product_code": "R01", "offer": "red_widget_half_price"},
        }
    ]
)


def coerce_policy(rules: Optional[Any]) -> DiscountPolicy:
    if rules is None:
        return DEFAULT_DISCOUNT_RULES
    if isinstance(rules, DiscountPolicy):
        return rules
    return DiscountPolicy(rules)
