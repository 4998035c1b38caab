from __future__ import annotations

from dataclasses import dataclass

from order_core.domain.exceptions import InvalidTransactionIdError

MAX_LENGTH = 128
ALLOWED_CHARS = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_")


@dataclass(frozen=True)
class TransactionId:
    """Identifier issued by the payment provider for one settled payment.

    Used as the replay-protection key:
      - Non-empty, max 128 chars
      - Whitespace is trimmed (normalization)
      - ASCII charset only: [A-Za-z0-9-_]
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidTransactionIdError("Transaction ID must be a string")

        normalized = self.value.strip()

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

        if not normalized:
            raise InvalidTransactionIdError("Transaction ID cannot be empty")

        if len(normalized) > MAX_LENGTH:
            raise InvalidTransactionIdError(
                f"Transaction ID cannot exceed {MAX_LENGTH} characters"
            )

        if any(ch not in ALLOWED_CHARS for ch in normalized):
            raise InvalidTransactionIdError(
                "Transaction ID contains invalid characters; allowed: [A-Za-z0-9-_]"
            )

    def __str__(self) -> str:
        return self.value
