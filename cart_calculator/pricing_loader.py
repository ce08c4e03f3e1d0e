from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from .engine.discount_policy import (
    DEFAULT_DISCOUNT_RULES,
    DEFAULT_OFFERS,
    DiscountPolicy,
)
from .errors import PricingConfigError
from .logging_config import get_logger
from .models.cart import Cart
from .models.catalogue import DEFAULT_CATALOGUE, Catalogue
from .models.delivery_rule import DEFAULT_DELIVERY_RULES, DeliveryRuleTable, DeliveryRuleTier
from .models.product import Product
from .schemas.pricing_config_v1 import PricingConfigV1

DEFAULT_PRICING_PATH = Path(__file__).resolve().parent / "rule_sets" / "default.yaml"


@dataclass(frozen=True)
class PricingConfig:
    """Read-only pricing setup shared by every cart built from it."""

    catalogue: Catalogue
    delivery_rules: DeliveryRuleTable
    offers: Mapping[str, bool]
    discount_rules: DiscountPolicy

    def new_cart(self, cart_id: Optional[str] = None) -> Cart:
        return Cart(
            self.catalogue,
            self.delivery_rules,
            self.offers,
            self.discount_rules,
            cart_id=cart_id,
        )


DEFAULT_PRICING = PricingConfig(
    catalogue=DEFAULT_CATALOGUE,
    delivery_rules=DEFAULT_DELIVERY_RULES,
    offers=DEFAULT_OFFERS,
    discount_rules=DEFAULT_DISCOUNT_RULES,
)


def pricing_config_from_dict(raw: Dict[str, Any]) -> PricingConfig:
    """
    Validate + build. Raises:
      - PricingConfigError on schema / rule set problems
      - InvalidPriceError when a money value is not an exact decimal string
    """
    try:
        cfg = PricingConfigV1.model_validate(raw)
    except ValidationError as e:
        raise PricingConfigError(f"Invalid pricing config: {e}") from e

    try:
        catalogue = Catalogue(
            Product(code=p.code, name=p.name, price=p.price) for p in cfg.catalogue
        )
        delivery_rules = DeliveryRuleTable(
            DeliveryRuleTier(min_amount=t.min_amount, max_amount=t.max_amount, charge=t.charge)
            for t in cfg.delivery_rules
        )
        discount_rules = DiscountPolicy.from_specs(r.model_dump() for r in cfg.discount_rules)
    except ValueError as e:
        raise PricingConfigError(str(e)) from e

    return PricingConfig(
        catalogue=catalogue,
        delivery_rules=delivery_rules,
        offers=MappingProxyType(dict(cfg.offers)),
        discount_rules=discount_rules,
    )


def load_pricing_config(path: Union[str, Path]) -> PricingConfig:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise PricingConfigError(f"Pricing file not readable: {p}", {"path": str(p)}) from e
    except yaml.YAMLError as e:
        raise PricingConfigError(f"Pricing file is not valid YAML: {p}", {"path": str(p)}) from e

    if not isinstance(raw, dict):
        raise PricingConfigError(f"Pricing file must contain a mapping: {p}", {"path": str(p)})

    config = pricing_config_from_dict(raw)
    get_logger().info(
        "Loaded pricing config {} ({} products, {} delivery tiers, {} discount rules)",
        p,
        len(config.catalogue),
        len(config.delivery_rules),
        len(config.discount_rules),
    )
    return config
