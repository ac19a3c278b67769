"""Time and randomness sources for the domain layer.

Identifier generation reads the clock and a random number generator. Both
are ports so the builder can be driven deterministically in tests.
"""

import random
from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current datetime."""


class RandomSourcePort(ABC):
    """Source of random integers used for identifier suffixes."""

    @abstractmethod
    def next_int(self) -> int:
        """Return a non-negative random integer."""


class SystemClock(ClockPort):
    """Wall clock in local time, matching the banks' expectation for CreDtTm."""

    def now(self) -> datetime:
        return datetime.now()


class SystemRandomSource(RandomSourcePort):
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next_int(self) -> int:
        return self._rng.randrange(2**31)
