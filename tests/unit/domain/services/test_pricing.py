"""Tests for calculate_prices.

Tests cover:
- Itemized totals and the total invariant
- Tax rounding (half-up to cents)
- Free-shipping threshold boundary
- Linearity of items price in quantity
"""

from decimal import Decimal

import pytest

from order_core.domain.entities import OrderLineItem, Product
from order_core.domain.exceptions import InvalidAmountError
from order_core.domain.services import PricingPolicy, calculate_prices
from order_core.domain.value_objects import Money


def line(price: str, qty: int, product_id: str = "P1") -> OrderLineItem:
    product = Product(id=product_id, name=product_id, image="/img.jpg", price=Money.of(price))
    return OrderLineItem.snapshot(product, qty)


def policy(threshold: str = "100.00", fee: str = "10.00", rate: str = "0.15") -> PricingPolicy:
    return PricingPolicy(
        tax_rate=Decimal(rate),
        free_shipping_threshold=Money.of(threshold),
        shipping_fee=Money.of(fee),
    )


class TestCalculatePricesScenario:
    def test_two_units_at_ten_below_threshold(self) -> None:
        prices = calculate_prices([line("10.00", 2)], policy(threshold="100.00"))

        assert prices.items_price == Money.of("20.00")
        assert prices.tax_price == Money.of("3.00")
        assert prices.shipping_price == Money.of("10.00")
        assert prices.total_price == Money.of("33.00")

    def test_two_units_at_ten_threshold_reached(self) -> None:
        prices = calculate_prices([line("10.00", 2)], policy(threshold="20.00"))

        assert prices.shipping_price == Money.zero()
        assert prices.total_price == Money.of("23.00")

    def test_threshold_below_items_price_is_free(self) -> None:
        prices = calculate_prices([line("10.00", 2)], policy(threshold="15.00"))

        assert prices.shipping_price == Money.zero()

    def test_one_cent_below_threshold_pays_shipping(self) -> None:
        prices = calculate_prices([line("99.99", 1)], policy(threshold="100.00"))

        assert prices.shipping_price == Money.of("10.00")


class TestCalculatePricesArithmetic:
    def test_multiple_lines_are_summed(self) -> None:
        items = [line("89.99", 1, "P2"), line("49.99", 2, "P3")]

        prices = calculate_prices(items, policy())

        assert prices.items_price == Money.of("189.97")

    def test_tax_is_rounded_half_up(self) -> None:
        # 0.10 * 0.15 = 0.015 -> 0.02
        prices = calculate_prices([line("0.10", 1)], policy())

        assert prices.tax_price == Money.of("0.02")

    @pytest.mark.parametrize(
        ("price", "qty"),
        [("0.01", 1), ("10.00", 2), ("19.99", 7), ("33.33", 3), ("1234.56", 11)],
    )
    def test_total_equals_sum_of_parts(self, price: str, qty: int) -> None:
        prices = calculate_prices([line(price, qty)], policy())

        assert prices.total_price == prices.items_price + prices.tax_price + prices.shipping_price

    @pytest.mark.parametrize(("price", "qty"), [("0.01", 1), ("19.99", 3), ("33.33", 5)])
    def test_doubling_quantities_doubles_items_price(self, price: str, qty: int) -> None:
        single = calculate_prices([line(price, qty), line("2.50", 1, "P9")], policy())
        doubled = calculate_prices([line(price, qty * 2), line("2.50", 2, "P9")], policy())

        assert doubled.items_price.amount == single.items_price.amount * 2

    def test_empty_items_yield_zero_totals(self) -> None:
        prices = calculate_prices([], policy())

        assert prices.items_price == Money.zero()
        assert prices.tax_price == Money.zero()
        assert prices.shipping_price == Money.zero()
        assert prices.total_price == Money.zero()

    def test_is_deterministic(self) -> None:
        items = [line("19.99", 3), line("5.01", 1, "P2")]

        assert calculate_prices(items, policy()) == calculate_prices(items, policy())

    def test_zero_tax_rate(self) -> None:
        prices = calculate_prices([line("10.00", 1)], policy(rate="0"))

        assert prices.tax_price == Money.zero()


class TestPricingPolicy:
    def test_defaults(self) -> None:
        default = PricingPolicy()

        assert default.tax_rate == Decimal("0.15")
        assert default.free_shipping_threshold == Money.of("100.00")
        assert default.shipping_fee == Money.of("10.00")

    @pytest.mark.parametrize("rate", ["-0.01", "1.01"])
    def test_rate_out_of_range_is_rejected(self, rate: str) -> None:
        with pytest.raises(InvalidAmountError):
            PricingPolicy(tax_rate=Decimal(rate))
