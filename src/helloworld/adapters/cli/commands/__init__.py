"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Greeter command from :mod:`.hello`
    * World-facts command from :mod:`.world`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .hello import cli_hello
from .info import cli_info
from .world import cli_world

__all__ = [
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_world",
]
