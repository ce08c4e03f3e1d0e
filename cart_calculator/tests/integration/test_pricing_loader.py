from decimal import Decimal
from pathlib import Path

import pytest

from cart_calculator.config import Settings
from cart_calculator.errors import InvalidPriceError, PricingConfigError
from cart_calculator.pricing import build_cart
from cart_calculator.pricing_loader import (
    DEFAULT_PRICING,
    DEFAULT_PRICING_PATH,
    load_pricing_config,
    pricing_config_from_dict,
)

CUSTOM_YAML = """
version: v1
catalogue:
  - code: P01
    name: Purple Widget
    price: "19.99"
  - code: Y01
    name: Yellow Widget
    price: "14.50"
delivery_rules:
  - min_amount: "100"
    charge: "0"
  - min_amount: "25"
    max_amount: "100"
    charge: "5.00"
  - min_amount: "0"
    max_amount: "25"
    charge: "10.00"
offers:
  purple_pair: true
discount_rules:
  - id: purple_pair
    type: paired_half_price
    params:
      product_code: P01
"""


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "pricing.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_shipped_default_yaml_matches_builtin_defaults():
    cfg = load_pricing_config(DEFAULT_PRICING_PATH)

    assert list(cfg.catalogue) == list(DEFAULT_PRICING.catalogue)
    for code, product in DEFAULT_PRICING.catalogue.items():
        assert cfg.catalogue[code] == product
    assert cfg.delivery_rules.tiers == DEFAULT_PRICING.delivery_rules.tiers
    assert dict(cfg.offers) == dict(DEFAULT_PRICING.offers)

    cart = cfg.new_cart()
    for code in ["B01", "B01", "R01", "R01", "R01"]:
        cart.add(code)
    assert cart.total() == Decimal("98.27")


def test_custom_pricing_file(tmp_path):
    cfg = load_pricing_config(_write(tmp_path, CUSTOM_YAML))
    cart = cfg.new_cart(cart_id="custom")

    cart.add("P01")
    cart.add("P01")
    cart.add("Y01")

    # 39.98 + 14.50 = 54.48, discount 9.995 -> net 44.485, delivery 5.00
    assert cart.subtotal() == Decimal("54.48")
    assert cart.discount() == Decimal("9.995")
    assert cart.total() == Decimal("49.48")


def test_bare_yaml_float_price_is_rejected(tmp_path):
    text = CUSTOM_YAML.replace('price: "19.99"', "price: 19.99")
    with pytest.raises(InvalidPriceError):
        load_pricing_config(_write(tmp_path, text))


def test_unknown_field_is_rejected():
    with pytest.raises(PricingConfigError):
        pricing_config_from_dict(
            {
                "catalogue": [{"code": "A", "name": "A", "price": "1", "colour": "red"}],
                "delivery_rules": [{"min_amount": "0", "charge": "0"}],
            }
        )


def test_unknown_rule_type_is_rejected():
    with pytest.raises(PricingConfigError, match="Unknown rule type"):
        pricing_config_from_dict(
            {
                "catalogue": [{"code": "A", "name": "A", "price": "1"}],
                "delivery_rules": [{"min_amount": "0", "charge": "0"}],
                "discount_rules": [{"id": "x", "type": "nope"}],
            }
        )


def test_missing_file(tmp_path):
    with pytest.raises(PricingConfigError, match="not readable"):
        load_pricing_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    with pytest.raises(PricingConfigError, match="not valid YAML"):
        load_pricing_config(_write(tmp_path, "catalogue: [unclosed"))


def test_build_cart_defaults():
    cart = build_cart(Settings(pricing_config_path=None), cart_id="c1")

    assert cart.cart_id == "c1"
    assert cart.catalogue is DEFAULT_PRICING.catalogue


def test_build_cart_from_settings(tmp_path):
    path = _write(tmp_path, CUSTOM_YAML)
    cart = build_cart(Settings(pricing_config_path=str(path)))

    cart.add("Y01")
    # 14.50 + 10.00
    assert cart.total() == Decimal("24.50")
