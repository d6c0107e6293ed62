"""Fixtures shared by the CLI, config and entry-point suites.

CLI tests run against production wiring and replace only the edge they care
about (clock or config loader), so logging and config rendering behave as
they do for a user.
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from datetime import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from helloworld.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_EXIT_TOOL_FIELDS = tuple(field.name for field in dataclasses.fields(type(lib_cli_exit_tools.config)))
_LOCAL_ENV = Path(__file__).resolve().parents[1] / ".env"

if _LOCAL_ENV.is_file():
    load_dotenv(_LOCAL_ENV)


def pytest_configure(config: pytest.Config) -> None:
    """Point coverage at a temp file before pytest-cov opens it."""
    if "COVERAGE_FILE" in os.environ:
        return
    target = Path(tempfile.gettempdir()) / ".coverage.helloworld"
    # A crashed run can leave SQLite side files behind.
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(f"{target}{suffix}").unlink()
    os.environ["COVERAGE_FILE"] = str(target)


def _services_with(**replacements: Any) -> ServicesFactory:
    from helloworld.composition import build_production

    services = dataclasses.replace(build_production(), **replacements)
    return lambda: services


def _returning(config: Config) -> Callable[..., Config]:
    def _get_config(**_kwargs: Any) -> Config:
        return config

    return _get_config


@pytest.fixture
def cli_runner() -> CliRunner:
    """A CliRunner whose result keeps stdout and stderr apart (Click 8.2+)."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    from helloworld.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove colour escapes from rich-click output."""
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with tracebacks off and put every exit-tools setting back afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    saved = {name: getattr(lib_cli_exit_tools.config, name) for name in _EXIT_TOOL_FIELDS}
    try:
        yield
    finally:
        for name, value in saved.items():
            setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def clear_config_cache() -> None:
    """Empty the loader cache up front; afterwards a test may have replaced the loader."""
    from helloworld.adapters.config.loader import get_config

    get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config straight from a dict, without touching disk."""
    return lambda data: Config(data, {})


@pytest.fixture
def source_info_factory() -> Callable[..., SourceInfo]:
    """Build provenance entries as lib_layered_config reports them."""

    def _make(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _make


@pytest.fixture
def fixed_clock_factory() -> Callable[..., ServicesFactory]:
    """Production services with the time of day pinned.

    Call it with ``hour``/``minute`` (default 02:00), a ready-made ``clock``,
    and optionally ``config_data`` to stand in for the layered config::

        factory = fixed_clock_factory(hour=9, minute=7)
        result = cli_runner.invoke(cli, ["hello", "Alice"], obj=factory)
        assert result.stdout == "Good day, Alice!\\n"
    """
    from helloworld.adapters.memory import FixedClock

    def _make(
        *,
        hour: int = 2,
        minute: int = 0,
        config_data: dict[str, Any] | None = None,
        clock: Callable[[], time] | None = None,
    ) -> ServicesFactory:
        replacements: dict[str, Any] = {"clock": clock or FixedClock(hour=hour, minute=minute)}
        if config_data is not None:
            replacements["get_config"] = _returning(Config(config_data, {}))
        return _services_with(**replacements)

    return _make


@pytest.fixture
def inject_config(clear_config_cache: None) -> Callable[[Config], ServicesFactory]:
    """Production services whose loader always returns the given Config."""
    return lambda config: _services_with(get_config=_returning(config))


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], ServicesFactory]:
    """Like ``inject_config`` but also records each requested profile."""

    def _inject(config: Config, seen: list[str | None]) -> ServicesFactory:
        def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            seen.append(profile)
            return config

        return _services_with(get_config=_get_config)

    return _inject
