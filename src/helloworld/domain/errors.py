"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidNameError(ValueError):
    """Name rejected before greeting generation.

    Raised when the name handed to the greeting generator is missing, empty,
    or whitespace-only. Inherits from ValueError so CLI boundaries treat it
    as an invalid argument.

    Example:
        >>> from helloworld.domain.errors import InvalidNameError
        >>> err = InvalidNameError("Name cannot be null or empty")
        >>> str(err)
        'Name cannot be null or empty'
        >>> isinstance(err, ValueError)
        True
    """


class InvalidPopulationError(ValueError):
    """Population count outside the formattable range.

    Raised by :func:`helloworld.domain.world.format_population` for negative
    counts.

    Example:
        >>> from helloworld.domain.errors import InvalidPopulationError
        >>> str(InvalidPopulationError("Population cannot be negative: -1"))
        'Population cannot be negative: -1'
    """


class InternalConsistencyError(RuntimeError):
    """Generated output failed its own post-condition check.

    Unreachable with the shipped constants. Raised in place of ``assert`` so
    the check also runs under ``python -O``.

    Example:
        >>> from helloworld.domain.errors import InternalConsistencyError
        >>> err = InternalConsistencyError("World info should contain population and language data")
        >>> isinstance(err, RuntimeError)
        True
    """


__all__ = [
    "InternalConsistencyError",
    "InvalidNameError",
    "InvalidPopulationError",
]
