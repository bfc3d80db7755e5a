"""Abstract clock used for cache timestamps."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract interface for reading the current time.

    Tests use FakeTime so cache validity can be checked against known
    timestamps without sleeping.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
