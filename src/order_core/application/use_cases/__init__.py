"""Use cases - Order lifecycle orchestration."""

from order_core.application.use_cases.confirm_delivery import ConfirmDeliveryUseCase
from order_core.application.use_cases.confirm_payment import ConfirmPaymentUseCase
from order_core.application.use_cases.create_order import CreateOrderUseCase
from order_core.application.use_cases.query_orders import (
    GetOrderByIdUseCase,
    ListAllOrdersUseCase,
    ListMyOrdersUseCase,
)

__all__ = [
    "ConfirmDeliveryUseCase",
    "ConfirmPaymentUseCase",
    "CreateOrderUseCase",
    "GetOrderByIdUseCase",
    "ListAllOrdersUseCase",
    "ListMyOrdersUseCase",
]
