"""Price calculation for order line items.

Pure and deterministic: the same items and policy always yield the same
totals. All arithmetic is fixed-point (Decimal, two places, half-up).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from order_core.domain.exceptions import InvalidAmountError
from order_core.domain.value_objects import Money

if TYPE_CHECKING:
    from order_core.domain.entities import OrderLineItem


@dataclass(frozen=True, slots=True)
class PricingPolicy:
    """Tax and shipping parameters.

    shipping_fee is charged when items_price is strictly below
    free_shipping_threshold.
    """

    tax_rate: Decimal = Decimal("0.15")
    free_shipping_threshold: Money = Money(amount=Decimal("100.00"))
    shipping_fee: Money = Money(amount=Decimal("10.00"))

    def __post_init__(self) -> None:
        if not isinstance(self.tax_rate, Decimal) or not self.tax_rate.is_finite():
            raise InvalidAmountError(f"Tax rate must be a finite Decimal, got {self.tax_rate!r}")
        if not Decimal(0) <= self.tax_rate <= Decimal(1):
            raise InvalidAmountError(f"Tax rate must be between 0 and 1, got {self.tax_rate}")


@dataclass(frozen=True, slots=True)
class OrderPrices:
    items_price: Money
    tax_price: Money
    shipping_price: Money
    total_price: Money


def calculate_prices(items: Iterable[OrderLineItem], policy: PricingPolicy) -> OrderPrices:
    """Compute itemized totals for a sequence of line items.

    Args:
        items: Line items carrying trusted unit prices and quantities.
        policy: Tax rate and shipping rules.

    Returns:
        OrderPrices with total_price == items + tax + shipping exactly.
        An empty sequence yields all-zero totals.
    """
    items = list(items)

    items_price = Money.zero()
    for item in items:
        items_price = items_price + item.line_total

    tax_price = items_price.apply_rate(policy.tax_rate)

    if items and items_price < policy.free_shipping_threshold:
        shipping_price = policy.shipping_fee
    else:
        shipping_price = Money.zero()

    return OrderPrices(
        items_price=items_price,
        tax_price=tax_price,
        shipping_price=shipping_price,
        total_price=items_price + tax_price + shipping_price,
    )
