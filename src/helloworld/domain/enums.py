"""Type-safe domain enums for output formats and greeting time bands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class TimeBand(str, Enum):
    """Hour-of-day ranges that select a greeting phrase list.

    Bands are half-open: morning covers hours 5 to 11, evening covers 18
    to 21, and every other hour (including values outside 0-23) is default.

    Attributes:
        MORNING: Hours in ``[5, 12)``.
        EVENING: Hours in ``[18, 22)``.
        DEFAULT: Any other hour.

    Example:
        >>> TimeBand.MORNING.value
        'morning'
        >>> TimeBand.DEFAULT == "default"
        True
    """

    MORNING = "morning"
    EVENING = "evening"
    DEFAULT = "default"


__all__ = [
    "OutputFormat",
    "TimeBand",
]
