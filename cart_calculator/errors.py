from __future__ import annotations

from typing import Any, Dict, Optional


class CartCalculatorError(Exception):
    """
    Base for all domain errors.
    - code: stable machine-readable kind (UPPER_SNAKE)
    - message: human readable
    - meta: extra context for callers / logs
    """

    code: str = "CART_CALCULATOR_ERROR"

    def __init__(self, message: str, meta: Optional[Dict[str, Any]] = None):
        self.message = str(message)
        self.meta = meta or {}
        super().__init__(self.message)


class InvalidPriceError(CartCalculatorError):
    code = "INVALID_PRICE"

    def __init__(self, value: Any, reason: str = "Price must be a string"):
        self.value = value
        super().__init__(reason, {"value": repr(value)})


class ProductNotFoundError(CartCalculatorError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_code: str):
        self.product_code = product_code
        super().__init__(
            f"Product {product_code} not found", {"product_code": product_code}
        )


class PricingConfigError(CartCalculatorError):
    code = "INVALID_PRICING_CONFIG"
