"""Public package surface exposing greetings, world facts, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: greeting and world-facts generators
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    generate_greeting,
    sanitize_name,
    select_greeting_prefix,
)
from .domain.world import (
    format_population,
    generate_world_info,
)

__all__ = [
    "format_population",
    "generate_greeting",
    "generate_world_info",
    "get_config",
    "print_info",
    "sanitize_name",
    "select_greeting_prefix",
]
