"""Read-side use cases: single order, caller's orders, all orders (admin)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.authorization import (
    require_admin,
    require_owner_or_admin,
    require_principal,
)
from order_core.application.dtos import OrderDetails, OwnerSummary
from order_core.domain.exceptions import OrderNotFoundError

if TYPE_CHECKING:
    from order_core.application.ports import OrderRepository, UserDirectory
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import OrderId, Principal


class GetOrderByIdUseCase:
    """Fetch one order with its owner's name and email.

    Owners see their own orders; admins may read any order.
    """

    def __init__(self, order_repository: OrderRepository, user_directory: UserDirectory) -> None:
        self._order_repo = order_repository
        self._users = user_directory

    def execute(self, principal: Principal | None, order_id: OrderId) -> OrderDetails:
        """
        Raises:
            UnauthorizedError: No principal supplied.
            OrderNotFoundError: Order does not exist.
            ForbiddenError: Caller is neither owner nor admin.
        """
        principal = require_principal(principal)

        order = self._order_repo.get(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order not found: {order_id}")

        require_owner_or_admin(principal, order)

        profile = self._users.get(order.owner_id)
        owner = OwnerSummary(
            id=order.owner_id,
            name=profile.name if profile else None,
            email=profile.email if profile else None,
        )
        return OrderDetails(order=order, owner=owner)


class ListMyOrdersUseCase:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repo = order_repository

    def execute(self, principal: Principal | None) -> list[Order]:
        """Return the caller's orders in creation order."""
        principal = require_principal(principal)
        return self._order_repo.list_by_owner(principal.identity)


class ListAllOrdersUseCase:
    """Admin listing of every order with owner id and name."""

    def __init__(self, order_repository: OrderRepository, user_directory: UserDirectory) -> None:
        self._order_repo = order_repository
        self._users = user_directory

    def execute(self, principal: Principal | None) -> list[OrderDetails]:
        require_admin(principal)

        names: dict[str, str | None] = {}
        details: list[OrderDetails] = []
        for order in self._order_repo.list_all():
            if order.owner_id not in names:
                profile = self._users.get(order.owner_id)
                names[order.owner_id] = profile.name if profile else None
            details.append(
                OrderDetails(
                    order=order,
                    owner=OwnerSummary(id=order.owner_id, name=names[order.owner_id]),
                )
            )
        return details
