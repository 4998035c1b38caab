from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from order_core.application.authorization import require_owner_or_admin, require_principal
from order_core.domain.entities import PaymentResult
from order_core.domain.exceptions import (
    AmountMismatchError,
    DuplicateTransactionError,
    OrderNotFoundError,
    PaymentNotVerifiedError,
)

if TYPE_CHECKING:
    from order_core.application.dtos import ConfirmPaymentRequest
    from order_core.application.ports import (
        LockProvider,
        OrderRepository,
        PaymentVerifier,
        TimeProvider,
        TransactionLedger,
    )
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import Principal

logger = logging.getLogger(__name__)


class ConfirmPaymentUseCase:
    """Orchestrates the unpaid → paid transition.

    Guards, evaluated in order inside the per-order lock (first failure wins):
    1. Order exists
    2. Caller owns the order or is an admin
    3. Provider verifies the transaction (client-asserted status is ignored)
    4. Transaction id has never settled any order
    5. Verified amount equals the order total exactly
    6. Order is not already paid

    Nothing is written unless every guard passes. The repository's unique
    constraint on the transaction id closes the race between two different
    orders presenting the same transaction concurrently.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        order_repository: OrderRepository,
        payment_verifier: PaymentVerifier,
        transaction_ledger: TransactionLedger,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._order_repo = order_repository
        self._payment_verifier = payment_verifier
        self._ledger = transaction_ledger

    def execute(self, principal: Principal | None, request: ConfirmPaymentRequest) -> Order:
        """Mark the order paid after verifying the provider transaction.

        Returns:
            The paid Order.

        Raises:
            UnauthorizedError: No principal supplied.
            OrderNotFoundError: Order does not exist.
            ForbiddenError: Caller is neither owner nor admin.
            PaymentNotVerifiedError: Provider did not confirm the transaction.
            DuplicateTransactionError: Transaction already settled an order.
            AmountMismatchError: Paid amount differs from the order total.
            OrderAlreadyPaidError: Order was paid by another transaction.
            PaymentProviderError: Provider could not be reached.
        """
        principal = require_principal(principal)

        with self._lock_provider.acquire(f"order:{request.order_id}"):
            return self._execute_within_lock(principal, request)

    def _execute_within_lock(self, principal: Principal, request: ConfirmPaymentRequest) -> Order:
        order = self._order_repo.get(request.order_id)
        if order is None:
            raise OrderNotFoundError(f"Order not found: {request.order_id}")

        require_owner_or_admin(principal, order)

        verification = self._payment_verifier.verify(request.transaction_id)
        if not verification.verified:
            logger.warning(
                "Payment not verified for order %s, transaction %s",
                order.id,
                request.transaction_id,
            )
            raise PaymentNotVerifiedError(
                f"Payment not verified: transaction {request.transaction_id}"
            )

        if not self._ledger.is_new_transaction(request.transaction_id):
            logger.warning(
                "Replay of transaction %s rejected for order %s",
                request.transaction_id,
                order.id,
            )
            raise DuplicateTransactionError(
                f"Transaction has already been used: {request.transaction_id}"
            )

        if not order.total_price.equals_amount(verification.amount):
            logger.warning(
                "Amount mismatch for order %s: paid %s, expected %s",
                order.id,
                verification.amount,
                order.total_price,
            )
            raise AmountMismatchError(
                f"Incorrect amount paid for order {order.id}: "
                f"paid {verification.amount}, expected {order.total_price}"
            )

        # Time fetched inside the lock so paid_at reflects the committed transition
        now = self._time_provider.now()
        paid_order = order.mark_paid(
            now,
            PaymentResult(
                id=request.transaction_id.value,
                status=request.status,
                update_time=request.update_time,
                email_address=request.payer_email,
            ),
        )
        self._order_repo.save(paid_order)

        logger.info(
            "Order %s paid with transaction %s (%s)",
            paid_order.id,
            request.transaction_id,
            paid_order.total_price,
        )
        return paid_order
