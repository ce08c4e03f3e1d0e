from __future__ import annotations

from typing import Optional

from .config import Settings, get_settings
from .models.cart import Cart
from .pricing_loader import DEFAULT_PRICING, PricingConfig, load_pricing_config


def active_pricing(settings: Optional[Settings] = None) -> PricingConfig:
    settings = settings or get_settings()
    if settings.pricing_config_path:
        return load_pricing_config(settings.pricing_config_path)
    return DEFAULT_PRICING


def build_cart(settings: Optional[Settings] = None, cart_id: Optional[str] = None) -> Cart:
    """New empty cart on the configured (or built-in) pricing."""
    return active_pricing(settings).new_cart(cart_id=cart_id)
