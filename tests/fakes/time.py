"""Fake Time implementation for testing.

FakeTime returns predetermined timestamps so ledger and registry records are
deterministic.
"""

from datetime import UTC, datetime

from kitbag.gateway.time.abc import Time

DEFAULT_TEST_TIME = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


class FakeTime(Time):
    """Fake clock returning a fixed sequence of timestamps.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, times: list[datetime] | None = None) -> None:
        """Create FakeTime.

        Args:
            times: Values returned by successive now() calls. The last value
                repeats once the list is exhausted. Defaults to DEFAULT_TEST_TIME.
        """
        self._times = times or [DEFAULT_TEST_TIME]
        self._now_calls = 0

    @property
    def now_calls(self) -> int:
        """Read-only count of now() calls for test assertions."""
        return self._now_calls

    def now(self) -> datetime:
        index = min(self._now_calls, len(self._times) - 1)
        self._now_calls += 1
        return self._times[index]
