from __future__ import annotations

import copy
from threading import Lock
from typing import TYPE_CHECKING, Any

from order_core.application.ports import OrderRepository
from order_core.domain.exceptions import DuplicateTransactionError
from order_core.infrastructure.order_records import order_from_record, order_to_record

if TYPE_CHECKING:
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import OrderId, TransactionId


class InMemoryOrderRepository(OrderRepository):
    """In-memory order repository for testing and local runs.

    Implementation notes:
    - Stores serialized records (see order_records) keyed by order id string,
      so every read returns a detached Order rebuilt from the record
    - Keeps a unique index of paymentResult.id -> order id
    - An internal mutex makes the unique-index check and the write atomic,
      standing in for a database unique index; other read-modify-write
      sequences rely on the external LockProvider
    - Dict insertion order is creation order
    """

    def __init__(self) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        self._transaction_index: dict[str, str] = {}
        self._mutex = Lock()

    def get(self, order_id: OrderId) -> Order | None:
        return self._load(str(order_id))

    def save(self, order: Order) -> None:
        record = order_to_record(order)
        order_key = record["_id"]
        transaction_id = order.transaction_id

        with self._mutex:
            if transaction_id is not None:
                owner = self._transaction_index.get(transaction_id)
                if owner is not None and owner != order_key:
                    raise DuplicateTransactionError(
                        f"Transaction {transaction_id} already settled order {owner}"
                    )
                self._transaction_index[transaction_id] = order_key
            self._records[order_key] = record

    def list_by_owner(self, owner_id: str) -> list[Order]:
        with self._mutex:
            records = [copy.deepcopy(r) for r in self._records.values() if r["user"] == owner_id]
        return [order_from_record(r) for r in records]

    def list_all(self) -> list[Order]:
        with self._mutex:
            records = [copy.deepcopy(r) for r in self._records.values()]
        return [order_from_record(r) for r in records]

    def find_by_transaction_id(self, transaction_id: TransactionId) -> Order | None:
        with self._mutex:
            order_key = self._transaction_index.get(transaction_id.value)
        if order_key is None:
            return None
        return self._load(order_key)

    def _load(self, order_key: str) -> Order | None:
        with self._mutex:
            record = self._records.get(order_key)
            if record is None:
                return None
            record = copy.deepcopy(record)
        return order_from_record(record)
