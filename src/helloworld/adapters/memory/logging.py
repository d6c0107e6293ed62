"""In-memory logging adapter for testing.

Commands run through ``build_testing`` never start the lib_log_rich
runtime; standard ``logging`` calls fall through to pytest's capture.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Leave the lib_log_rich runtime untouched."""


__all__ = ["init_logging_in_memory"]
