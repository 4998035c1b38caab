from decimal import Decimal

import pytest

from order_core.domain.exceptions import InvalidAmountError
from order_core.domain.value_objects import Money


class TestMoneyConstruction:
    def test_of_decimal_string(self) -> None:
        money = Money.of("20.00")

        assert money.amount == Decimal("20.00")

    def test_of_int_is_quantized_to_cents(self) -> None:
        money = Money.of(20)

        assert str(money) == "20.00"

    def test_of_decimal(self) -> None:
        assert Money.of(Decimal("3.5")) == Money.of("3.50")

    def test_sub_cent_input_rounds_half_up(self) -> None:
        assert Money.of("1.005") == Money.of("1.01")
        assert Money.of("1.004") == Money.of("1.00")

    def test_zero(self) -> None:
        assert str(Money.zero()) == "0.00"

    def test_float_is_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            Money.of(10.5)

    def test_bool_is_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            Money.of(True)

    def test_negative_is_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            Money.of("-0.01")

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity"])
    def test_unparsable_or_non_finite_is_rejected(self, value: str) -> None:
        with pytest.raises(InvalidAmountError):
            Money.of(value)

    @pytest.mark.parametrize("value", ["1E+30", Decimal("1E+27")])
    def test_amount_beyond_cent_precision_is_rejected(self, value: str | Decimal) -> None:
        with pytest.raises(InvalidAmountError):
            Money.of(value)

    def test_product_beyond_cent_precision_is_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            Money.of("10.00").times(10**27)

    def test_money_is_frozen(self) -> None:
        money = Money.of("1.00")

        with pytest.raises(AttributeError):
            money.amount = Decimal("2.00")  # type: ignore[misc]


class TestMoneyArithmetic:
    def test_addition_is_exact(self) -> None:
        assert Money.of("0.10") + Money.of("0.20") == Money.of("0.30")

    def test_times_quantity(self) -> None:
        assert Money.of("19.99").times(3) == Money.of("59.97")

    def test_apply_rate_rounds_half_up(self) -> None:
        assert Money.of("0.05").apply_rate(Decimal("0.5")) == Money.of("0.03")

    def test_apply_rate_typical_tax(self) -> None:
        assert Money.of("20.00").apply_rate(Decimal("0.15")) == Money.of("3.00")

    def test_ordering(self) -> None:
        assert Money.of("9.99") < Money.of("10.00")


class TestMoneyEqualsAmount:
    def test_same_string_matches(self) -> None:
        assert Money.of("20.00").equals_amount("20.00") is True

    def test_equal_decimal_value_matches(self) -> None:
        assert Money.of("20.00").equals_amount("20") is True

    def test_one_cent_difference_does_not_match(self) -> None:
        assert Money.of("20.00").equals_amount("19.99") is False
        assert Money.of("20.00").equals_amount("20.01") is False

    def test_sub_cent_difference_does_not_match(self) -> None:
        assert Money.of("20.00").equals_amount("20.001") is False

    @pytest.mark.parametrize("value", ["", "abc", "NaN", None])
    def test_garbage_never_matches(self, value: str | None) -> None:
        assert Money.of("20.00").equals_amount(value) is False  # type: ignore[arg-type]


class TestMoneyFormatting:
    def test_str_has_two_decimal_places(self) -> None:
        assert str(Money.of("5")) == "5.00"
        assert str(Money.of("1234.5")) == "1234.50"
