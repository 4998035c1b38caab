from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import OrderId, TransactionId


class OrderRepository(ABC):
    """Port for order persistence.

    Contract:
    - get() returns None if the order does not exist (no exception)
    - save() performs upsert: creates if new, updates if exists
    - save() enforces a system-wide uniqueness constraint on the payment
      transaction id, atomically with the write, and raises
      DuplicateTransactionError on violation
    - list_by_owner() and list_all() return orders in creation order
    - OrderId is immutable after entity creation

    Thread safety note:
    Apart from the transaction uniqueness constraint, repositories assume
    the caller has acquired the per-order lock via LockProvider before
    read-modify-write sequences. This matches database behavior where a
    unique index holds under any isolation level.
    """

    @abstractmethod
    def get(self, order_id: OrderId) -> Order | None:
        """Retrieve an order by ID.

        Returns:
            The Order entity if found, None otherwise.
            Returned entity is detached; mutations do not affect stored state.
        """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist an order (upsert semantics).

        Raises:
            DuplicateTransactionError: If order.payment_result.id already
                settled a different order.
        """

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Order]:
        """Return all orders owned by the given identity."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in the system."""

    @abstractmethod
    def find_by_transaction_id(self, transaction_id: TransactionId) -> Order | None:
        """Return the order settled by this transaction id, if any."""
