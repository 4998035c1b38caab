from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for serializing transitions of a single order.

    Payment and delivery confirmation each read an order, check their guards
    and write it back. Both run inside acquire(f"order:{order_id}") so two
    confirmations of one order cannot interleave between read and write.
    Orders with different ids proceed in parallel.

    Implementations block until the key is free and release it when the
    block exits, whether it returns or raises.
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Hold the lock for `resource_id` for the duration of the block.

        Args:
            resource_id: Lock key; use cases pass "order:<uuid>".
        """
        ...
