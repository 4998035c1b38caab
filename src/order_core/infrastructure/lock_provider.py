from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from order_core.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryLockProvider(LockProvider):
    """In-memory lock provider using per-order locks.

    Implementation uses two-phase locking:
    1. Registry lock protects the lock dictionary during lookup/creation
    2. Order lock serializes transitions of that specific order

    Limitations:
    - Single-process only (locks don't work across processes); across
      instances, the storage unique constraint on transaction id still holds
    - Locks are never evicted
    """

    def __init__(self) -> None:
        self._locks: dict[str, Lock] = {}
        self._registry_lock = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self._registry_lock:
            lock = self._locks.setdefault(resource_id, Lock())

        with lock:
            yield


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    For single-threaded unit tests only; never for tests that exercise
    concurrent payment confirmations.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
