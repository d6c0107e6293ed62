"""Configuration ports backed by nothing: no files, no environment."""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """An empty Config, whatever profile is asked for."""
    del profile, start_dir
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    # Never opened; only its shape matters.
    return Path(tempfile.gettempdir()) / "helloworld" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept the call and render nothing."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
