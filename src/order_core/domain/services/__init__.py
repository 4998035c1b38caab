"""Domain services - Stateless operations on domain objects."""

from order_core.domain.services.pricing import OrderPrices, PricingPolicy, calculate_prices

__all__ = [
    "OrderPrices",
    "PricingPolicy",
    "calculate_prices",
]
