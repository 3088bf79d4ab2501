"""Processor-time clocks for bracketing a parse."""

import time
from abc import ABC, abstractmethod

from parse_timing.errors import MeasurementError


class Clock(ABC):
    """Source of monotonically non-decreasing integer time samples.

    Passed explicitly to the runner so tests can substitute a scripted clock.
    """

    @property
    @abstractmethod
    def unit(self) -> str:
        """Unit suffix of the samples, e.g. ``ps``."""
        pass

    @abstractmethod
    def sample(self) -> int:
        """Return the current reading in ``unit``."""
        pass

    def elapsed(self, start: int, end: int) -> int:
        """Return ``end - start``.

        Raises:
            MeasurementError: If the clock went backwards.
        """
        if end < start:
            raise MeasurementError(start, end)
        return end - start


class ProcessClock(Clock):
    """CPU time (user + system) of the current process, in picoseconds.

    Readings come from ``time.process_time_ns`` and are scaled by 1000, so the
    resolution is at most one nanosecond.
    """

    PS_PER_NS = 1000

    @property
    def unit(self) -> str:
        return "ps"

    def sample(self) -> int:
        return time.process_time_ns() * self.PS_PER_NS
