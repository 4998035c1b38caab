from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from order_core.application.authorization import require_principal
from order_core.domain.entities import Order, OrderLineItem
from order_core.domain.exceptions import InvalidRequestError, ProductNotFoundError
from order_core.domain.services import calculate_prices

if TYPE_CHECKING:
    from order_core.application.dtos import CreateOrderRequest
    from order_core.application.ports import (
        OrderRepository,
        ProductRepository,
        TimeProvider,
    )
    from order_core.domain.entities import Product
    from order_core.domain.services import PricingPolicy
    from order_core.domain.value_objects import Principal

logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """Prices a client cart server-side and persists a new order.

    Responsibilities:
    - Reject empty carts before any lookup
    - Resolve every product reference in one batched lookup
    - Snapshot name, image and price from the catalog, never from the client
    - Price the snapshots and persist one unpaid, undelivered order
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        product_repository: ProductRepository,
        order_repository: OrderRepository,
        pricing_policy: PricingPolicy,
    ) -> None:
        self._time_provider = time_provider
        self._product_repo = product_repository
        self._order_repo = order_repository
        self._pricing_policy = pricing_policy

    def execute(self, principal: Principal | None, request: CreateOrderRequest) -> Order:
        """Create an order owned by the caller.

        Returns:
            The persisted Order.

        Raises:
            UnauthorizedError: No principal supplied.
            InvalidRequestError: Empty cart or missing payment method.
            ProductNotFoundError: A product reference has no catalog record.
            InvalidQuantityError: A quantity is not a positive integer.
        """
        principal = require_principal(principal)

        if not request.items:
            raise InvalidRequestError("No order items")

        products = self._lookup_products(request)

        line_items = [
            OrderLineItem.snapshot(products[item.product_id], item.qty)
            for item in request.items
        ]
        prices = calculate_prices(line_items, self._pricing_policy)

        order = Order.create(
            owner_id=principal.identity,
            items=line_items,
            shipping_address=request.shipping_address,
            payment_method=request.payment_method,
            prices=prices,
            created_at=self._time_provider.now(),
        )
        self._order_repo.save(order)

        logger.info(
            "Order %s created for %s: %d items, total %s",
            order.id,
            order.owner_id,
            len(order.items),
            order.total_price,
        )
        return order

    def _lookup_products(self, request: CreateOrderRequest) -> dict[str, Product]:
        requested_ids = {item.product_id for item in request.items}
        found = {product.id: product for product in self._product_repo.find_by_ids(requested_ids)}

        missing: list[str] = []
        for item in request.items:
            if item.product_id not in found and item.product_id not in missing:
                missing.append(item.product_id)
        if missing:
            raise ProductNotFoundError(missing)

        return found
