from decimal import Decimal

import pytest

from cart_calculator.models.catalogue import DEFAULT_CATALOGUE, Catalogue
from cart_calculator.models.product import Product


def test_default_catalogue_contents():
    assert list(DEFAULT_CATALOGUE) == ["R01", "G01", "B01"]
    assert DEFAULT_CATALOGUE["R01"].name == "Red Widget"
    assert DEFAULT_CATALOGUE["R01"].price == Decimal("32.95")
    assert DEFAULT_CATALOGUE["G01"].price == Decimal("24.95")
    assert DEFAULT_CATALOGUE["B01"].price == Decimal("7.95")


def test_lookup_is_exact_match():
    assert DEFAULT_CATALOGUE.lookup("G01").name == "Green Widget"
    assert DEFAULT_CATALOGUE.lookup("g01") is None
    assert DEFAULT_CATALOGUE.lookup(" G01") is None
    assert DEFAULT_CATALOGUE.lookup("INVALID") is None


def test_catalogue_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CATALOGUE["X01"] = Product(code="X01", name="X", price="1")  # type: ignore[index]


def test_catalogue_rejects_duplicate_codes():
    with pytest.raises(ValueError, match="Duplicate product codes"):
        Catalogue(
            [
                Product(code="A", name="One", price="1.00"),
                Product(code="A", name="Two", price="2.00"),
            ]
        )
