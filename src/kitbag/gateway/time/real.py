"""Production clock."""

from datetime import UTC, datetime

from kitbag.gateway.time.abc import Time


class RealTime(Time):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)
