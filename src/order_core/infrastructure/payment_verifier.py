from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.ports import PaymentVerification, PaymentVerifier

if TYPE_CHECKING:
    from order_core.domain.value_objects import TransactionId


class StubPaymentVerifier(PaymentVerifier):
    """In-memory stand-in for the payment provider.

    Register settled transactions with complete(); anything else verifies
    as False. Records every lookup in `calls` so tests can assert the
    provider was consulted.
    """

    def __init__(self) -> None:
        self._payments: dict[str, PaymentVerification] = {}
        self.calls: list[str] = []

    def complete(self, transaction_id: str, amount: str) -> None:
        self._payments[transaction_id] = PaymentVerification(verified=True, amount=amount)

    def decline(self, transaction_id: str, amount: str = "") -> None:
        self._payments[transaction_id] = PaymentVerification(verified=False, amount=amount)

    def verify(self, transaction_id: TransactionId) -> PaymentVerification:
        self.calls.append(transaction_id.value)
        return self._payments.get(
            transaction_id.value, PaymentVerification(verified=False, amount="")
        )
