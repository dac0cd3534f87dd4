"""Fake Time implementation returning a fixed instant."""

from datetime import UTC, datetime

from wrk.gateway.time.abc import Time


class FakeTime(Time):
    """Clock frozen at a configured instant."""

    def __init__(self, *, current_time: datetime | None = None) -> None:
        """Create FakeTime.

        Args:
            current_time: Instant returned by now() (defaults to 2024-01-15 12:00 UTC)
        """
        self._current_time = (
            current_time if current_time is not None else datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
        )

    def now(self) -> datetime:
        return self._current_time
