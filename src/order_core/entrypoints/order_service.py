"""Payload-level facade over the order use cases.

Routing frameworks call into OrderService with the already-authenticated
Principal and the decoded JSON body; responses are persisted-layout records
(see infrastructure.order_records), with currency as decimal strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from order_core.application.dtos import (
    CartItemRequest,
    ConfirmPaymentRequest,
    CreateOrderRequest,
    OrderDetails,
)
from order_core.application.use_cases import (
    ConfirmDeliveryUseCase,
    ConfirmPaymentUseCase,
    CreateOrderUseCase,
    GetOrderByIdUseCase,
    ListAllOrdersUseCase,
    ListMyOrdersUseCase,
)
from order_core.config import load_environment, load_paypal_settings, load_pricing_policy
from order_core.domain.entities import ShippingAddress
from order_core.domain.exceptions import InvalidRequestError
from order_core.domain.value_objects import OrderId
from order_core.infrastructure import (
    InMemoryLockProvider,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryUserDirectory,
    PayPalPaymentVerifier,
    RepositoryTransactionLedger,
    SystemTimeProvider,
)
from order_core.infrastructure.order_records import order_to_record

if TYPE_CHECKING:
    from order_core.application.ports import (
        LockProvider,
        OrderRepository,
        PaymentVerifier,
        ProductRepository,
        TimeProvider,
        UserDirectory,
    )
    from order_core.domain.services import PricingPolicy
    from order_core.domain.value_objects import Principal


@dataclass(frozen=True, slots=True)
class OrderServiceDependencies:
    lock_provider: LockProvider
    time_provider: TimeProvider
    order_repository: OrderRepository
    product_repository: ProductRepository
    user_directory: UserDirectory
    payment_verifier: PaymentVerifier
    pricing_policy: PricingPolicy


def _details_to_record(details: OrderDetails) -> dict[str, Any]:
    record = order_to_record(details.order)
    owner: dict[str, Any] = {"_id": details.owner.id, "name": details.owner.name}
    if details.owner.email is not None:
        owner["email"] = details.owner.email
    record["user"] = owner
    return record


def _parse_shipping_address(payload: Any) -> ShippingAddress:
    if not isinstance(payload, Mapping):
        raise InvalidRequestError("Shipping address is required")
    return ShippingAddress(
        address=payload.get("address", ""),
        city=payload.get("city", ""),
        postal_code=payload.get("postalCode", ""),
        country=payload.get("country", ""),
    )


class OrderService:
    def __init__(self, deps: OrderServiceDependencies) -> None:
        ledger = RepositoryTransactionLedger(deps.order_repository)
        self._create = CreateOrderUseCase(
            time_provider=deps.time_provider,
            product_repository=deps.product_repository,
            order_repository=deps.order_repository,
            pricing_policy=deps.pricing_policy,
        )
        self._get = GetOrderByIdUseCase(deps.order_repository, deps.user_directory)
        self._mine = ListMyOrdersUseCase(deps.order_repository)
        self._all = ListAllOrdersUseCase(deps.order_repository, deps.user_directory)
        self._pay = ConfirmPaymentUseCase(
            lock_provider=deps.lock_provider,
            time_provider=deps.time_provider,
            order_repository=deps.order_repository,
            payment_verifier=deps.payment_verifier,
            transaction_ledger=ledger,
        )
        self._deliver = ConfirmDeliveryUseCase(
            lock_provider=deps.lock_provider,
            time_provider=deps.time_provider,
            order_repository=deps.order_repository,
        )

    def add_order_items(self, principal: Principal | None, body: Mapping[str, Any]) -> dict[str, Any]:
        raw_items = body.get("orderItems") or []
        if not isinstance(raw_items, list):
            raise InvalidRequestError("orderItems must be a list")
        request = CreateOrderRequest(
            items=tuple(CartItemRequest.from_payload(item) for item in raw_items),
            shipping_address=_parse_shipping_address(body.get("shippingAddress")),
            payment_method=str(body.get("paymentMethod") or ""),
        )
        return order_to_record(self._create.execute(principal, request))

    def get_order_by_id(self, principal: Principal | None, order_id: str) -> dict[str, Any]:
        return _details_to_record(self._get.execute(principal, OrderId.from_string(order_id)))

    def get_my_orders(self, principal: Principal | None) -> list[dict[str, Any]]:
        return [order_to_record(order) for order in self._mine.execute(principal)]

    def get_orders(self, principal: Principal | None) -> list[dict[str, Any]]:
        return [_details_to_record(details) for details in self._all.execute(principal)]

    def update_order_to_paid(
        self, principal: Principal | None, order_id: str, body: Mapping[str, Any]
    ) -> dict[str, Any]:
        request = ConfirmPaymentRequest.from_payload(order_id, body)
        return order_to_record(self._pay.execute(principal, request))

    def update_order_to_delivered(self, principal: Principal | None, order_id: str) -> dict[str, Any]:
        return order_to_record(self._deliver.execute(principal, OrderId.from_string(order_id)))


def build_order_service(
    env: Mapping[str, str] | None = None,
    product_repository: ProductRepository | None = None,
    user_directory: UserDirectory | None = None,
) -> OrderService:
    """Wire an OrderService from environment configuration.

    Uses in-memory storage unless repositories are supplied, and the PayPal
    verifier configured from PAYPAL_* variables.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    if env is None:
        load_environment()

    deps = OrderServiceDependencies(
        lock_provider=InMemoryLockProvider(),
        time_provider=SystemTimeProvider(),
        order_repository=InMemoryOrderRepository(),
        product_repository=product_repository or InMemoryProductRepository(),
        user_directory=user_directory or InMemoryUserDirectory(),
        payment_verifier=PayPalPaymentVerifier(load_paypal_settings(env)),
        pricing_policy=load_pricing_policy(env),
    )
    return OrderService(deps)
