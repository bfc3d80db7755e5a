"""Fake clock for deterministic testing."""

from datetime import UTC, datetime, timedelta

from prstatus.gateway.time.abc import Time


class FakeTime(Time):
    """Test clock that only moves when told to.

    Usage:
        time = FakeTime(datetime(2024, 1, 15, 10, 30, tzinfo=UTC))
        time.advance(seconds=5)
    """

    def __init__(self, current: datetime | None = None) -> None:
        self._current = current if current is not None else datetime(2024, 1, 1, tzinfo=UTC)

    def now(self) -> datetime:
        return self._current

    def advance(self, *, seconds: float) -> None:
        self._current = self._current + timedelta(seconds=seconds)

    def set_time(self, current: datetime) -> None:
        self._current = current
