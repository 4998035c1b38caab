from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Clock used to stamp createdAt, paidAt and deliveredAt.

    Persisted order records serialize these as ISO-8601 strings, so every
    stamp must carry tzinfo=datetime.UTC. Naive or offset datetimes are a
    bug in the adapter.
    """

    @abstractmethod
    def now(self) -> datetime:
        ...
