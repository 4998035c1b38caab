from datetime import UTC, datetime, timedelta

from order_core.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Clock frozen at a given UTC instant, moved only by the caller.

    Lets tests assert exact paidAt and deliveredAt values, and observe
    delivered_at being re-stamped after advance(). Single-threaded use only.
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = self._require_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def set_time(self, instant: datetime) -> None:
        self._instant = self._require_utc(instant)

    def advance(self, delta: timedelta) -> None:
        self.set_time(self._instant + delta)

    @staticmethod
    def _require_utc(instant: datetime) -> datetime:
        if instant.tzinfo is not UTC:
            raise ValueError(f"Order timestamps must be UTC, got tzinfo={instant.tzinfo}")
        return instant
