from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.ports import TransactionLedger

if TYPE_CHECKING:
    from order_core.application.ports import OrderRepository
    from order_core.domain.value_objects import TransactionId


class RepositoryTransactionLedger(TransactionLedger):
    """Ledger check backed by the orders' payment results.

    This is the fast-path check; the repository's unique constraint on the
    transaction id remains the authority when writers race.
    """

    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repo = order_repository

    def is_new_transaction(self, transaction_id: TransactionId) -> bool:
        return self._order_repo.find_by_transaction_id(transaction_id) is None
