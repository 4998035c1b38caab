"""Order entity with lifecycle state machine behavior.

State machine:
    - unpaid → paid (mark_paid), exactly once, guarded by payment verification
    - undelivered → delivered (mark_delivered), no payment precondition
    - paid and delivered flags never revert to False
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from order_core.domain.exceptions import (
    InvalidQuantityError,
    InvalidRequestError,
    OrderAlreadyPaidError,
)
from order_core.domain.value_objects import Money, OrderId

if TYPE_CHECKING:
    from datetime import datetime

    from order_core.domain.entities.product import Product
    from order_core.domain.services.pricing import OrderPrices


@dataclass(frozen=True, slots=True)
class OrderLineItem:
    """Snapshot of a product at order-creation time plus the requested quantity.

    Snapshot fields never change afterwards, even if the product does.
    Use snapshot() to build instances from a looked-up Product.
    """

    product_id: str
    name: str
    image: str
    price: Money
    qty: int

    def __post_init__(self) -> None:
        if isinstance(self.qty, bool) or not isinstance(self.qty, int) or self.qty <= 0:
            raise InvalidQuantityError(
                f"Quantity must be a positive integer, got {self.qty!r} for product {self.product_id}"
            )

    @classmethod
    def snapshot(cls, product: Product, qty: int) -> OrderLineItem:
        """Capture name, image and price from the authoritative product record."""
        return cls(
            product_id=product.id,
            name=product.name,
            image=product.image,
            price=product.price,
            qty=qty,
        )

    @property
    def line_total(self) -> Money:
        return self.price.times(self.qty)


@dataclass(frozen=True, slots=True)
class ShippingAddress:
    address: str
    city: str
    postal_code: str
    country: str

    def __post_init__(self) -> None:
        for field_name in ("address", "city", "postal_code", "country"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidRequestError(f"Shipping address field '{field_name}' is required")


@dataclass(frozen=True, slots=True)
class PaymentResult:
    """Provider-side record of the payment that settled an order."""

    id: str
    status: str
    update_time: str
    email_address: str | None


@dataclass(frozen=True, slots=True)
class Order:
    """Order entity with lifecycle state machine behavior.

    Order is immutable (frozen dataclass). All state-changing methods
    return a new Order instance; the caller persists it.

    Invariants enforced at construction:
        - items is a non-empty, order-preserving tuple of line items
        - total_price == items_price + tax_price + shipping_price exactly
        - is_paid iff paid_at and payment_result are set
        - is_delivered iff delivered_at is set
    """

    id: OrderId
    owner_id: str
    items: tuple[OrderLineItem, ...]
    shipping_address: ShippingAddress
    payment_method: str
    items_price: Money
    tax_price: Money
    shipping_price: Money
    total_price: Money
    created_at: datetime
    is_paid: bool = False
    paid_at: datetime | None = None
    payment_result: PaymentResult | None = None
    is_delivered: bool = False
    delivered_at: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

        if not self.items:
            raise InvalidRequestError("Order must contain at least one item")

        if not self.payment_method or not self.payment_method.strip():
            raise InvalidRequestError("Payment method is required")

        expected_total = self.items_price + self.tax_price + self.shipping_price
        if self.total_price != expected_total:
            raise InvalidRequestError(
                f"Order total {self.total_price} does not equal "
                f"items + tax + shipping ({expected_total})"
            )

        if self.is_paid != (self.paid_at is not None) or self.is_paid != (
            self.payment_result is not None
        ):
            raise InvalidRequestError("is_paid, paid_at and payment_result must agree")

        if self.is_delivered != (self.delivered_at is not None):
            raise InvalidRequestError("is_delivered and delivered_at must agree")

    @classmethod
    def create(
        cls,
        owner_id: str,
        items: tuple[OrderLineItem, ...] | list[OrderLineItem],
        shipping_address: ShippingAddress,
        payment_method: str,
        prices: OrderPrices,
        created_at: datetime,
    ) -> Order:
        """Factory for new orders: fresh id, unpaid and undelivered.

        Raises:
            InvalidRequestError: If items are empty or prices are inconsistent.
        """
        return cls(
            id=OrderId.generate(),
            owner_id=owner_id,
            items=tuple(items),
            shipping_address=shipping_address,
            payment_method=payment_method,
            items_price=prices.items_price,
            tax_price=prices.tax_price,
            shipping_price=prices.shipping_price,
            total_price=prices.total_price,
            created_at=created_at,
        )

    @property
    def transaction_id(self) -> str | None:
        return self.payment_result.id if self.payment_result is not None else None

    def mark_paid(self, now: datetime, payment_result: PaymentResult) -> Order:
        """Transition to paid.

        Args:
            now: Current timestamp (UTC).
            payment_result: The verified provider payment.

        Returns:
            New Order instance with is_paid=True.

        Raises:
            OrderAlreadyPaidError: If the order is already paid.

        Note:
            This method does NOT verify the payment. The use case is
            responsible for the verification, replay and amount guards
            before calling this method.
        """
        if self.is_paid:
            raise OrderAlreadyPaidError(
                f"Order {self.id} already paid with transaction {self.transaction_id}"
            )

        return replace(self, is_paid=True, paid_at=now, payment_result=payment_result)

    def mark_delivered(self, now: datetime) -> Order:
        """Transition to delivered.

        Calling this on a delivered order re-stamps delivered_at.
        """
        return replace(self, is_delivered=True, delivered_at=now)
