from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Type

D = Decimal

# Decisions (avoid string typos)
DECISION_APPLIED = "APPLIED"
DECISION_SKIPPED = "SKIPPED"

if TYPE_CHECKING:
    from ..models.line_item import LineItem


@dataclass(frozen=True)
class RuleResult:
    """
    Result of evaluating a discount rule.
    - decision: APPLIED / SKIPPED
    - amount: discount amount (>= 0, subtracted from the subtotal)
    - meta: explainability payload for the breakdown
    """

    decision: str
    amount: D
    meta: Dict[str, Any]

    @staticmethod
    def applied(amount: D, meta: Optional[Dict[str, Any]] = None) -> "RuleResult":
        return RuleResult(decision=DECISION_APPLIED, amount=amount, meta=meta or {})

    @staticmethod
    def skipped(meta: Optional[Dict[str, Any]] = None) -> "RuleResult":
        return RuleResult(decision=DECISION_SKIPPED, amount=D("0"), meta=meta or {})


class Rule:
    """
    Base class for all discount rules. Every rule must implement
    apply(items, offers).

    items: ordered mapping product code -> LineItem (read only!)
    offers: offer flags of the cart; a rule only fires when its offer is on

    params["offer"] names the gating flag, defaulting to the rule id.
    """

    type_name: str = "base"

    def __init__(self, rule_id: str, title: str, params: Optional[Dict[str, Any]] = None):
        self.rule_id = str(rule_id)
        self.title = str(title)
        self.params = dict(params or {})
        self.offer = str(self.params.get("offer") or self.rule_id)

    def is_enabled(self, offers: Mapping[str, bool]) -> bool:
        return bool(offers.get(self.offer, False))

    def apply(self, items: Mapping[str, "LineItem"], offers: Mapping[str, bool]) -> RuleResult:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rule_id={self.rule_id!r}, offer={self.offer!r})"


# Registry: rule_type -> Rule class
rule_registry: Dict[str, Type[Rule]] = {}


def register(rule_cls: Type[Rule]) -> Type[Rule]:
    """
    Decorator to register a rule by its type_name.
    Fails fast on duplicate registrations.
    """
    key = getattr(rule_cls, "type_name", None)
    if not key or key == Rule.type_name:
        raise ValueError(f"Rule class {rule_cls.__name__} has no type_name")

    if key in rule_registry and rule_registry[key] is not rule_cls:
        raise ValueError(
            f"Duplicate rule registration for type '{key}': "
            f"{rule_registry[key].__name__} vs {rule_cls.__name__}"
        )

    rule_registry[key] = rule_cls
    return rule_cls
