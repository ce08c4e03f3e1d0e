from __future__ import annotations

import pytest

import cart_calculator.rule_types  # noqa: F401 (register all rules)

from cart_calculator.engine.discount_policy import DEFAULT_DISCOUNT_RULES, DEFAULT_OFFERS
from cart_calculator.models.cart import Cart
from cart_calculator.models.catalogue import DEFAULT_CATALOGUE
from cart_calculator.models.delivery_rule import DEFAULT_DELIVERY_RULES
from cart_calculator.models.line_item import LineItem
from cart_calculator.models.product import Product


@pytest.fixture
def catalogue():
    return DEFAULT_CATALOGUE


@pytest.fixture
def delivery_rules():
    return DEFAULT_DELIVERY_RULES


@pytest.fixture
def offers():
    return dict(DEFAULT_OFFERS)


@pytest.fixture
def cart(catalogue, delivery_rules, offers):
    return Cart(catalogue, delivery_rules, offers, cart_id="test_cart_1")


@pytest.fixture
def red_widget():
    return Product(code="R01", name="Red Widget", price="32.95")


@pytest.fixture
def items_with(red_widget):
    """Build an items mapping with `qty` red widgets, like a cart holds."""

    def _make(qty: int):
        if qty == 0:
            return {}
        item = LineItem(red_widget)
        for _ in range(qty - 1):
            item.increment_quantity()
        return {"R01": item}

    return _make


@pytest.fixture
def default_rules():
    return DEFAULT_DISCOUNT_RULES
