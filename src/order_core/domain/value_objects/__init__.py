"""Value objects - Immutable objects defined by their attributes."""

from order_core.domain.value_objects.money import Money
from order_core.domain.value_objects.order_id import OrderId
from order_core.domain.value_objects.principal import Principal
from order_core.domain.value_objects.transaction_id import TransactionId

__all__ = [
    "Money",
    "OrderId",
    "Principal",
    "TransactionId",
]
