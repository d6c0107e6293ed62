"""World facts: population formatting and the fixed facts report."""

from __future__ import annotations

from typing import Final

from .errors import InternalConsistencyError, InvalidPopulationError

#: Approximate world population.
WORLD_POPULATION: Final[int] = 8_100_000_000

#: Major world languages with speaker counts.
TOP_LANGUAGES: Final[tuple[str, ...]] = (
    "Mandarin Chinese (918M)",
    "Spanish (460M)",
    "English (379M)",
    "Hindi (341M)",
    "Bengali (228M)",
    "Portuguese (221M)",
    "Russian (154M)",
    "Japanese (128M)",
)

#: Share of land area and population per continent.
CONTINENTS: Final[tuple[str, ...]] = (
    "Asia (30% land, 60% population)",
    "Africa (20% land, 18% population)",
    "North America (16% land, 8% population)",
    "South America (12% land, 6% population)",
    "Antarctica (10% land, 0% population)",
    "Europe (7% land, 10% population)",
    "Australia/Oceania (6% land, 1% population)",
)

BULLET: Final[str] = "  * "
MIN_WORLD_INFO_LENGTH: Final[int] = 100

_SCALES: Final[tuple[tuple[int, str], ...]] = (
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
)


def format_population(count: int) -> str:
    """Format a head count with one decimal and a unit word.

    Args:
        count: Non-negative number of people.

    Returns:
        ``"<n.n> billion|million|thousand"`` or the bare integer below 1000.

    Raises:
        InvalidPopulationError: If *count* is negative.

    Examples:
        >>> format_population(8_100_000_000)
        '8.1 billion'
        >>> format_population(2_500_000)
        '2.5 million'
        >>> format_population(1_000)
        '1.0 thousand'
        >>> format_population(999)
        '999'
    """
    if count < 0:
        raise InvalidPopulationError(f"Population cannot be negative: {count}")

    for threshold, unit in _SCALES:
        if count >= threshold:
            return f"{count / threshold:.1f} {unit}"
    return str(count)


def _bulleted(items: tuple[str, ...]) -> list[str]:
    return [f"{BULLET}{item}" for item in items]


def generate_world_info() -> str:
    """Compose the world facts report.

    Returns:
        Multi-line report with a population line, a bulleted language list,
        and a bulleted continent list.

    Raises:
        InternalConsistencyError: If the composed text lacks population or
            language data.

    Example:
        >>> report = generate_world_info()
        >>> report.splitlines()[0]
        'World Information Summary:'
        >>> "Population: 8.1 billion people (approximate)" in report
        True
    """
    lines = [
        "World Information Summary:",
        "========================",
        "",
        f"Population: {format_population(WORLD_POPULATION)} people (approximate)",
        "",
        "Major languages by speakers:",
        *_bulleted(TOP_LANGUAGES),
        "",
        "Continental distribution:",
        *_bulleted(CONTINENTS),
    ]
    report = "\n".join(lines) + "\n"

    lowered = report.lower()
    if "population" not in lowered or "languages" not in lowered:
        raise InternalConsistencyError("World info must contain population and language data")
    return report


def is_valid_world_info(world_info: str | None) -> bool:
    """Return True when *world_info* looks like a complete facts report.

    Examples:
        >>> is_valid_world_info(generate_world_info())
        True
        >>> is_valid_world_info("population and languages")
        False
    """
    if world_info is None or not world_info.strip():
        return False

    lowered = world_info.lower()
    return (
        "population" in lowered
        and "languages" in lowered
        and "continental" in lowered
        and len(world_info) > MIN_WORLD_INFO_LENGTH
    )


def validate_world_output(greeting: str, world_info: str) -> None:
    """Check the combined output of the world command.

    Args:
        greeting: Greeting generated for the world.
        world_info: Facts report from :func:`generate_world_info`.

    Raises:
        InternalConsistencyError: If either part is empty, the greeting does
            not mention the world, or the report lacks population or
            language data.

    Examples:
        >>> validate_world_output("Hello, World!", generate_world_info())
        >>> validate_world_output("Hello, Bob!", generate_world_info())
        Traceback (most recent call last):
        ...
        helloworld.domain.errors.InternalConsistencyError: Greeting should reference the world
    """
    if not greeting:
        raise InternalConsistencyError("Generated greeting is invalid")
    if not world_info:
        raise InternalConsistencyError("Generated world info is invalid")
    if "world" not in greeting.lower():
        raise InternalConsistencyError("Greeting should reference the world")

    lowered = world_info.lower()
    if "population" not in lowered or "languages" not in lowered:
        raise InternalConsistencyError("World info should contain population and language data")


__all__ = [
    "BULLET",
    "CONTINENTS",
    "TOP_LANGUAGES",
    "WORLD_POPULATION",
    "format_population",
    "generate_world_info",
    "is_valid_world_info",
    "validate_world_output",
]
