# cart_calculator/schemas/pricing_config_v1.py
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, constr


# Money fields are Any: Product / DeliveryRuleTier do the
# exact-decimal check and raise InvalidPriceError on a bare YAML float.


class ProductV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: constr(min_length=1)  # type: ignore
    name: str
    price: Any


class DeliveryTierV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min_amount: Any
    max_amount: Any = None
    charge: Any


class DiscountRuleV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: constr(min_length=1)  # type: ignore
    type: constr(min_length=1)  # type: ignore
    title: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)


class PricingConfigV1(BaseModel):
    """
    One pricing file = catalogue + delivery tiers (in match order) +
    offer flags + discount rules.
    """

    model_config = ConfigDict(extra="forbid")

    version: Literal["v1"] = "v1"
    catalogue: List[ProductV1] = Field(min_length=1)
    delivery_rules: List[DeliveryTierV1] = Field(min_length=1)
    offers: Dict[str, bool] = Field(default_factory=dict)
    discount_rules: List[DiscountRuleV1] = Field(default_factory=list)
