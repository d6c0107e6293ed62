"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the greeting and world-facts generators that form the core
business logic of the application.

Contents:
    * :mod:`.behaviors` - Name sanitizing and time-of-day greetings
    * :mod:`.world` - Population formatting and the world facts report
    * :mod:`.enums` - Domain enumerations (OutputFormat, TimeBand)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_NAME,
    format_greeting,
    generate_greeting,
    is_valid_name,
    resolve_time_band,
    sanitize_name,
    select_greeting_prefix,
)
from .enums import OutputFormat, TimeBand
from .errors import InternalConsistencyError, InvalidNameError, InvalidPopulationError
from .world import (
    WORLD_POPULATION,
    format_population,
    generate_world_info,
    is_valid_world_info,
    validate_world_output,
)

__all__ = [
    # Behaviors
    "DEFAULT_NAME",
    "format_greeting",
    "generate_greeting",
    "is_valid_name",
    "resolve_time_band",
    "sanitize_name",
    "select_greeting_prefix",
    # World facts
    "WORLD_POPULATION",
    "format_population",
    "generate_world_info",
    "is_valid_world_info",
    "validate_world_output",
    # Enums
    "OutputFormat",
    "TimeBand",
    # Errors
    "InternalConsistencyError",
    "InvalidNameError",
    "InvalidPopulationError",
]
