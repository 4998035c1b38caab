"""Checks on the principal supplied by the external auth boundary.

Token handling lives outside this package; these helpers only consume the
resulting Principal (identity plus admin flag).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.domain.exceptions import ForbiddenError, UnauthorizedError

if TYPE_CHECKING:
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import Principal


def require_principal(principal: Principal | None) -> Principal:
    if principal is None or not principal.identity:
        raise UnauthorizedError("Not authorized, no principal")
    return principal


def require_admin(principal: Principal | None) -> Principal:
    principal = require_principal(principal)
    if not principal.is_admin:
        raise ForbiddenError("Not authorized as admin")
    return principal


def require_owner_or_admin(principal: Principal | None, order: Order) -> Principal:
    """Allow the order's owner; admins may act on any order."""
    principal = require_principal(principal)
    if not principal.is_admin and principal.identity != order.owner_id:
        raise ForbiddenError(f"Order {order.id} does not belong to the caller")
    return principal
