"""Process-level driver: run the group, map the outcome to an exit status."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from helloworld import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from helloworld.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    if not isinstance(exc, SystemExit):
        lib_cli_exit_tools.print_exception_message(
            trace_back=verbose,
            length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
        )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli has no way to hand over ``obj``, hence the
    # explicit standalone_mode=False call.
    from .root import cli

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_failure(exc)
    return 0


def _shutdown_logging() -> None:
    # Only the main thread owns the runtime; a worker must not tear it down.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``helloworld`` with *argv* and return the exit status.

    ``services_factory`` is mandatory; the entry points pass
    :func:`helloworld.composition.build_production`. With
    ``restore_traceback`` left on, the ``--traceback`` flags seen before the
    call are back in place afterwards. The logging runtime is always shut
    down on the way out.

    Example:
        >>> from helloworld.composition import build_production
        >>> main(["hello", "Ada"], services_factory=build_production)  # doctest: +SKIP
        Hello, Ada!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass helloworld.composition.build_production.")

    args = sys.argv[1:] if argv is None else list(argv)
    before = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(before)
        _shutdown_logging()


__all__ = ["main"]
