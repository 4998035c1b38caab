"""Domain entities - Objects with identity and lifecycle."""

from order_core.domain.entities.order import (
    Order,
    OrderLineItem,
    PaymentResult,
    ShippingAddress,
)
from order_core.domain.entities.product import Product

__all__ = [
    "Order",
    "OrderLineItem",
    "PaymentResult",
    "Product",
    "ShippingAddress",
]
