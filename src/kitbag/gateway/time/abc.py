"""Clock abstraction for ledger timestamps."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock so tests can pin timestamps."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
