from .product import Product  # noqa
from .catalogue import Catalogue, DEFAULT_CATALOGUE  # noqa
from .line_item import LineItem, LineSummary  # noqa
from .delivery_rule import DeliveryRuleTier, DeliveryRuleTable, DEFAULT_DELIVERY_RULES  # noqa
from .cart import Cart, CartBreakdown  # noqa
