"""Test doubles for every application port.

Nothing here touches the filesystem, the wall clock or lib_log_rich, which
keeps :func:`helloworld.composition.build_testing` fast and repeatable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clock import FixedClock
from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory

# Type-checker-only proof that each double fits its port.
if TYPE_CHECKING:
    from helloworld.application.ports import (
        Clock,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_clock: Clock = FixedClock()

__all__ = [
    "FixedClock",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
