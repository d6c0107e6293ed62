"""Clock adapter - wall-clock time for greeting selection.

Contents:
    * :func:`.system.system_clock` - Local time of day from the OS clock
"""

from __future__ import annotations

from .system import system_clock

__all__ = ["system_clock"]
