from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.domain.value_objects import TransactionId


class TransactionLedger(ABC):
    """Port answering whether a transaction id was ever applied to an order."""

    @abstractmethod
    def is_new_transaction(self, transaction_id: TransactionId) -> bool:
        """Return True if no order in the system carries this transaction id."""
