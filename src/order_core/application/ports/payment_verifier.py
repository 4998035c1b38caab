from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.domain.value_objects import TransactionId


@dataclass(frozen=True, slots=True)
class PaymentVerification:
    """Provider's answer for a transaction id.

    amount is the decimal string reported by the provider (e.g. "20.00").
    """

    verified: bool
    amount: str


class PaymentVerifier(ABC):
    """Port for the external payment provider.

    Contract:
    - verify() MUST make a live call to the provider (no local cache)
    - verify() reports verified=False for unknown or incomplete transactions
    - verify() raises PaymentProviderError when the provider cannot answer
    """

    @abstractmethod
    def verify(self, transaction_id: TransactionId) -> PaymentVerification:
        """Confirm the transaction with the provider and return the paid amount."""
