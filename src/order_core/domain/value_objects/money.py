"""Fixed-point currency value object.

All amounts are held as Decimal quantized to two places. Binary floats are
rejected at the boundary so that exact comparisons (verified paid amount vs
order total) never suffer rounding error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from order_core.domain.exceptions import InvalidAmountError

CENTS = Decimal("0.01")
ROUNDING = ROUND_HALF_UP


def to_cents(value: Decimal) -> Decimal:
    """Round a Decimal to two places using the single rounding rule."""
    return value.quantize(CENTS, rounding=ROUNDING)


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """Non-negative currency amount with two decimal places."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidAmountError(f"Money amount must be a Decimal, got {type(self.amount).__name__}")

        if not self.amount.is_finite():
            raise InvalidAmountError(f"Money amount must be finite, got {self.amount}")

        if self.amount < 0:
            raise InvalidAmountError(f"Money amount cannot be negative, got {self.amount}")

        try:
            cents = to_cents(self.amount)
        except InvalidOperation as e:
            raise InvalidAmountError(f"Money amount out of range: {self.amount}") from e
        object.__setattr__(self, "amount", cents)

    @classmethod
    def of(cls, value: str | int | Decimal) -> Money:
        """Build Money from a decimal string, an int or a Decimal.

        Raises:
            InvalidAmountError: For floats, unparsable strings, negatives and
                amounts too large to hold in cents.
        """
        if isinstance(value, bool) or isinstance(value, float):
            raise InvalidAmountError(f"Money cannot be built from {type(value).__name__}: {value!r}")

        if isinstance(value, Decimal):
            return cls(amount=value)

        try:
            return cls(amount=Decimal(str(value).strip()))
        except InvalidOperation as e:
            raise InvalidAmountError(f"Invalid money amount: {value!r}") from e

    @classmethod
    def zero(cls) -> Money:
        return cls(amount=Decimal("0.00"))

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(amount=self.amount + other.amount)

    def times(self, qty: int) -> Money:
        """Multiply by an integer quantity (exact)."""
        return Money(amount=self.amount * qty)

    def apply_rate(self, rate: Decimal) -> Money:
        """Multiply by a rate and round half-up to cents."""
        return Money(amount=self.amount * rate)

    def equals_amount(self, value: str) -> bool:
        """Decimal-exact comparison against an untrusted amount string.

        No tolerance is applied. Unparsable input never matches.
        """
        try:
            other = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            return False
        if not other.is_finite():
            return False
        return other == self.amount

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
