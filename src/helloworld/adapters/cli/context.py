"""Per-invocation state carried on the Click context, plus traceback toggles.

The root group builds one :class:`CLIContext` and parks it on ``ctx.obj``;
subcommands read it back through :func:`get_cli_context`. The traceback
helpers keep ``lib_cli_exit_tools.config`` in step with ``--traceback`` and
let :func:`helloworld.adapters.cli.main.main` undo the change afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from helloworld.composition import AppServices


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools`` flags that ``--traceback`` touches."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """What the root group resolved before a subcommand runs.

    ``set_overrides`` is kept verbatim so ``config --profile`` can reload
    another profile and still honour the ``--set`` values.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(ctx: click.Context, state: CLIContext) -> None:
    """Replace the services factory on ``ctx.obj`` with the resolved *state*."""
    ctx.obj = state


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the state stored by the root group.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=True, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        True
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. The root group must run before subcommands.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, coloured tracebacks on or off for the exit helpers."""
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Read the traceback flags as they are right now."""
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags previously read by :func:`snapshot_traceback_state`.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(not before.enabled)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
