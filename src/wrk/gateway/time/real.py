"""Real Time implementation using the system clock."""

from datetime import UTC, datetime

from wrk.gateway.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)
