"""Where concrete adapters meet the application ports.

:func:`build_production` is what the console script and ``python -m`` use.
:func:`build_testing` swaps every I/O edge for an in-memory double and pins
the clock, so greetings become deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.clock import system_clock
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.clock import FixedClock
    from ..application.ports import (
        Clock,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    # Checked by the type checker only: each adapter must fit its port.
    _clock_port: Clock = system_clock
    _config_port: GetConfig = get_config
    _default_path_port: GetDefaultConfigPath = get_default_config_path
    _display_port: DisplayConfig = display_config
    _logging_port: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The set of port implementations a CLI run works with."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    clock: Clock


def build_production() -> AppServices:
    """Real clock, layered config from disk, lib_log_rich logging."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        clock=system_clock,
    )


def build_testing(*, clock: FixedClock | None = None) -> AppServices:
    """In-memory services; *clock* defaults to 02:00, which greets with "Hello".

    Example:
        >>> build_testing().clock().strftime("%H:%M")
        '02:00'
    """
    from ..adapters import memory

    return AppServices(
        get_config=memory.get_config_in_memory,
        get_default_config_path=memory.get_default_config_path_in_memory,
        display_config=memory.display_config_in_memory,
        init_logging=memory.init_logging_in_memory,
        clock=memory.FixedClock() if clock is None else clock,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "get_default_config_path",
    "init_logging",
    "system_clock",
]
