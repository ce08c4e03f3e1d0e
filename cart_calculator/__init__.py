from .errors import (  # noqa
    CartCalculatorError,
    InvalidPriceError,
    PricingConfigError,
    ProductNotFoundError,
)
from .money import round_cent  # noqa
from .models import (  # noqa
    Cart,
    CartBreakdown,
    Catalogue,
    DEFAULT_CATALOGUE,
    DEFAULT_DELIVERY_RULES,
    DeliveryRuleTable,
    DeliveryRuleTier,
    LineItem,
    LineSummary,
    Product,
)
from .engine.discount_policy import DEFAULT_DISCOUNT_RULES, DEFAULT_OFFERS, DiscountPolicy  # noqa
from .pricing import build_cart  # noqa

__version__ = "0.1.0"
