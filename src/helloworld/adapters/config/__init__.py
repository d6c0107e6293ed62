"""Configuration adapter - loading, display, overrides, and typed sections.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.greeter` - Pydantic view of the ``[greeter]`` section
"""

from __future__ import annotations

from .display import display_config
from .greeter import GreeterConfigModel, load_greeter_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
    "GreeterConfigModel",
    "load_greeter_config",
]
