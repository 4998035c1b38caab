from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from order_core.application.authorization import require_admin
from order_core.domain.exceptions import OrderNotFoundError

if TYPE_CHECKING:
    from order_core.application.ports import LockProvider, OrderRepository, TimeProvider
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import OrderId, Principal

logger = logging.getLogger(__name__)


class ConfirmDeliveryUseCase:
    """Admin-only undelivered → delivered transition.

    No payment or amount precondition. Confirming twice re-stamps delivered_at.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        order_repository: OrderRepository,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._order_repo = order_repository

    def execute(self, principal: Principal | None, order_id: OrderId) -> Order:
        """Mark the order delivered.

        Raises:
            UnauthorizedError: No principal supplied.
            ForbiddenError: Caller is not an admin.
            OrderNotFoundError: Order does not exist.
        """
        require_admin(principal)

        with self._lock_provider.acquire(f"order:{order_id}"):
            order = self._order_repo.get(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order not found: {order_id}")

            delivered_order = order.mark_delivered(self._time_provider.now())
            self._order_repo.save(delivered_order)

        logger.info("Order %s delivered", delivered_order.id)
        return delivered_order
