"""Wall-clock adapter satisfying the ``Clock`` port."""

from __future__ import annotations

from datetime import datetime, time


def system_clock() -> time:
    """Return the current local time of day.

    Example:
        >>> isinstance(system_clock(), time)
        True
    """
    return datetime.now().time()


__all__ = ["system_clock"]
