"""In-memory clock adapter for deterministic tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock frozen at a single time of day.

    Satisfies the ``Clock`` protocol so tests can pin greeting selection
    to a known (hour, minute) pair.

    Example:
        >>> FixedClock(hour=9, minute=7)()
        datetime.time(9, 7)
    """

    hour: int = 2
    minute: int = 0

    def __call__(self) -> time:
        return time(self.hour, self.minute)


__all__ = ["FixedClock"]
