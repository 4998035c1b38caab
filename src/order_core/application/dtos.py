"""Data Transfer Objects for use case input/output.

Client-submitted cart data is deliberately a separate type from the catalog
Product: a CartItemRequest carries only a product reference and a quantity,
so line-item construction has no client price or name to read.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from order_core.domain.exceptions import InvalidQuantityError, InvalidRequestError
from order_core.domain.value_objects import OrderId, TransactionId

if TYPE_CHECKING:
    from order_core.domain.entities import Order, ShippingAddress


@dataclass(frozen=True, slots=True)
class CartItemRequest:
    """One client cart line: which product, how many."""

    product_id: str
    qty: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> CartItemRequest:
        """Read a cart line from a client payload.

        Accepts the product reference under "_id" or "product". Any other
        key (price, name, image, ...) is ignored.

        Raises:
            InvalidRequestError: If the line is not an object or the product
                reference is missing.
            InvalidQuantityError: If qty is not a positive integer.
        """
        if not isinstance(payload, Mapping):
            raise InvalidRequestError(f"Cart item must be an object, got {type(payload).__name__}")

        product_id = payload.get("_id") or payload.get("product")
        if not isinstance(product_id, str) or not product_id.strip():
            raise InvalidRequestError("Cart item is missing a product reference")

        raw_qty = payload.get("qty")
        if isinstance(raw_qty, int) and not isinstance(raw_qty, bool):
            qty = raw_qty
        elif isinstance(raw_qty, str) and raw_qty.strip().isascii() and raw_qty.strip().isdecimal():
            try:
                qty = int(raw_qty)
            except ValueError as e:
                # Longer than the interpreter's int string conversion limit
                raise InvalidQuantityError(f"Invalid quantity for product {product_id}") from e
        else:
            raise InvalidQuantityError(f"Invalid quantity for product {product_id}: {raw_qty!r}")

        if qty <= 0:
            raise InvalidQuantityError(f"Quantity must be positive for product {product_id}: {qty}")

        return cls(product_id=product_id.strip(), qty=qty)


@dataclass(frozen=True, slots=True)
class CreateOrderRequest:
    items: tuple[CartItemRequest, ...]
    shipping_address: ShippingAddress
    payment_method: str


@dataclass(frozen=True, slots=True)
class ConfirmPaymentRequest:
    """Payment callback data as asserted by the client.

    Only the transaction id is trusted, and only after the provider
    confirms it; status and update_time are recorded as given.
    """

    order_id: OrderId
    transaction_id: TransactionId
    status: str
    update_time: str
    payer_email: str | None = None

    @classmethod
    def from_payload(cls, order_id: str, payload: Mapping[str, Any]) -> ConfirmPaymentRequest:
        """Map a provider callback body ({id, status, update_time, payer}) to a request."""
        payer = payload.get("payer") or {}
        return cls(
            order_id=OrderId.from_string(order_id),
            transaction_id=TransactionId(payload.get("id")),
            status=str(payload.get("status") or ""),
            update_time=str(payload.get("update_time") or ""),
            payer_email=payer.get("email_address") if isinstance(payer, Mapping) else None,
        )


@dataclass(frozen=True, slots=True)
class OwnerSummary:
    """Denormalized view of an order's owner.

    email is None for the admin listing, which projects id and name only.
    """

    id: str
    name: str | None
    email: str | None = None


@dataclass(frozen=True, slots=True)
class OrderDetails:
    order: Order
    owner: OwnerSummary
