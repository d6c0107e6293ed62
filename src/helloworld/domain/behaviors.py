"""Pure greeting functions with no I/O or framework dependencies.

The current time is always passed in by the caller, so every function here
is deterministic. Callers obtain the time from the ``Clock`` port.

Contents:
    * :func:`sanitize_name` - normalize a free-text name for display.
    * :func:`resolve_time_band` - map an hour to a :class:`TimeBand`.
    * :func:`select_greeting_prefix` - pick the prefix word for (hour, minute).
    * :func:`format_greeting` - join prefix and name.
    * :func:`generate_greeting` - validate, sanitize, select, and format.
    * :func:`is_valid_name` - cheap pre-check for callers.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import time
from types import MappingProxyType
from typing import Final

from .enums import TimeBand
from .errors import InvalidNameError

DEFAULT_NAME: Final[str] = "World"
FALLBACK_NAME: Final[str] = "Anonymous"
MAX_NAME_LENGTH: Final[int] = 50
MAX_VALID_NAME_LENGTH: Final[int] = 100
TRUNCATION_MARKER: Final[str] = "..."

MORNING_GREETINGS: Final[tuple[str, ...]] = ("Good morning", "Good day", "Hello")
EVENING_GREETINGS: Final[tuple[str, ...]] = ("Good evening", "Hello", "Greetings")
DEFAULT_GREETINGS: Final[tuple[str, ...]] = ("Hello", "Hi", "Greetings")

GREETINGS_BY_BAND: Final[Mapping[TimeBand, tuple[str, ...]]] = MappingProxyType(
    {
        TimeBand.MORNING: MORNING_GREETINGS,
        TimeBand.EVENING: EVENING_GREETINGS,
        TimeBand.DEFAULT: DEFAULT_GREETINGS,
    }
)

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_name(name: str) -> str:
    """Return a display-safe version of *name*.

    Control characters are removed first, so a tab between two words joins
    them rather than becoming a space. Never raises.

    Args:
        name: Raw name, possibly empty.

    Returns:
        A non-empty string of at most 50 characters plus the truncation
        marker.

    Examples:
        >>> sanitize_name("  Ada   Lovelace ")
        'Ada Lovelace'
        >>> sanitize_name("Bo\\x00b")
        'Bob'
        >>> sanitize_name("\\x07\\x1b")
        'Anonymous'
        >>> len(sanitize_name("x" * 80))
        53
    """
    sanitized = _CONTROL_CHARACTERS.sub("", name)
    sanitized = _WHITESPACE_RUN.sub(" ", sanitized).strip()

    if len(sanitized) > MAX_NAME_LENGTH:
        sanitized = sanitized[:MAX_NAME_LENGTH] + TRUNCATION_MARKER

    return sanitized or FALLBACK_NAME


def resolve_time_band(hour: int) -> TimeBand:
    """Map an hour of the day to its greeting band.

    Examples:
        >>> resolve_time_band(9)
        <TimeBand.MORNING: 'morning'>
        >>> resolve_time_band(12)
        <TimeBand.DEFAULT: 'default'>
        >>> resolve_time_band(21)
        <TimeBand.EVENING: 'evening'>
    """
    if 5 <= hour < 12:
        return TimeBand.MORNING
    if 18 <= hour < 22:
        return TimeBand.EVENING
    return TimeBand.DEFAULT


def select_greeting_prefix(hour: int, minute: int) -> str:
    """Pick the greeting prefix word for the given time.

    The band chosen by *hour* supplies the phrase list; *minute* indexes
    into it modulo its length.

    Examples:
        >>> select_greeting_prefix(9, 7)
        'Good day'
        >>> select_greeting_prefix(20, 5)
        'Greetings'
        >>> select_greeting_prefix(2, 0)
        'Hello'
    """
    phrases = GREETINGS_BY_BAND[resolve_time_band(hour)]
    return phrases[minute % len(phrases)]


def format_greeting(prefix: str, name: str) -> str:
    """Join *prefix* and *name* into ``"<Prefix>, <Name>!"``.

    Example:
        >>> format_greeting("Hello", "World")
        'Hello, World!'
    """
    return f"{prefix}, {name}!"


def generate_greeting(name: str | None, *, now: time) -> str:
    """Build the full greeting for *name* at time *now*.

    Args:
        name: Name to greet. Must contain at least one non-whitespace
            character.
        now: Time of day driving the prefix selection.

    Returns:
        The formatted greeting sentence.

    Raises:
        InvalidNameError: If *name* is None, empty, or whitespace-only.

    Examples:
        >>> generate_greeting("Alice", now=time(9, 7))
        'Good day, Alice!'
        >>> generate_greeting("   ", now=time(9, 7))
        Traceback (most recent call last):
        ...
        helloworld.domain.errors.InvalidNameError: Name cannot be null or empty
    """
    if name is None or not name.strip():
        raise InvalidNameError("Name cannot be null or empty")

    clean_name = sanitize_name(name.strip())
    prefix = select_greeting_prefix(now.hour, now.minute)
    return format_greeting(prefix, clean_name)


def is_valid_name(name: str | None) -> bool:
    """Return True when *name* is non-blank and at most 100 characters once stripped.

    Examples:
        >>> is_valid_name("Alice")
        True
        >>> is_valid_name("  ")
        False
        >>> is_valid_name("x" * 101)
        False
    """
    if name is None:
        return False
    trimmed = name.strip()
    return bool(trimmed) and len(trimmed) <= MAX_VALID_NAME_LENGTH


__all__ = [
    "DEFAULT_GREETINGS",
    "DEFAULT_NAME",
    "EVENING_GREETINGS",
    "FALLBACK_NAME",
    "GREETINGS_BY_BAND",
    "MAX_NAME_LENGTH",
    "MAX_VALID_NAME_LENGTH",
    "MORNING_GREETINGS",
    "TRUNCATION_MARKER",
    "format_greeting",
    "generate_greeting",
    "is_valid_name",
    "resolve_time_band",
    "sanitize_name",
    "select_greeting_prefix",
]
