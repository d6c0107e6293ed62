"""Shared error handling for the greeting commands.

Internal module (underscore prefix) used by ``hello`` and ``world``.

Contents:
    * :class:`StrictCommand` - Command whose usage errors exit with GENERAL_ERROR.
    * :func:`raise_invalid_argument` - Abort with an error message and usage text.
    * :func:`diagnose` - Write a ``--verbose`` diagnostic line to stderr.
    * :func:`execute_with_error_handling` - Map domain failures to exit codes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from typing import NoReturn, TypeVar

import lib_cli_exit_tools
import rich_click as click

from helloworld.domain.errors import InternalConsistencyError

from ..constants import TRACEBACK_VERBOSE_LIMIT
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StrictCommand(click.RichCommand):
    """Command that reports unknown options and stray arguments with exit code 1.

    Click exits usage errors with 2; the greeting commands promise 1 for
    every invalid argument.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = ExitCode.GENERAL_ERROR
            raise


def raise_invalid_argument(ctx: click.Context, message: str) -> NoReturn:
    """Abort the command with *message* and its usage text on stderr.

    Raises:
        click.UsageError: Always, carrying exit code GENERAL_ERROR.
    """
    exc = click.UsageError(message, ctx=ctx)
    exc.exit_code = ExitCode.GENERAL_ERROR
    raise exc


def diagnose(verbose: bool, message: str) -> None:
    """Echo *message* to stderr when *verbose* is set."""
    if verbose:
        click.echo(message, err=True)


def execute_with_error_handling(
    ctx: click.Context,
    operation: Callable[[], T],
    *,
    command: str,
    verbose: bool,
) -> T:
    """Run *operation*, translating failures into user-facing errors.

    Args:
        ctx: Click context, used for usage text on invalid arguments.
        operation: Zero-argument callable producing the command's output.
        command: Command name for log records.
        verbose: Print tracebacks for internal and unexpected errors.

    Returns:
        Whatever *operation* returns.

    Raises:
        click.UsageError: For ``ValueError`` (invalid names, counts).
        SystemExit: With GENERAL_ERROR for every other failure.

    Exception Priority Order:
        1. ValueError -> usage error, exit 1
        2. InternalConsistencyError -> "Internal error", exit 1
        3. Exception (catch-all) -> "Unexpected error", exit 1

    Development Mode:
        Set ``DEVELOPMENT_MODE`` to re-raise unexpected exceptions unchanged.
    """
    try:
        return operation()
    except ValueError as exc:
        logger.info("Invalid argument", extra={"command": command, "error": str(exc)})
        raise_invalid_argument(ctx, str(exc))
    except InternalConsistencyError as exc:
        _report_failure(exc, "Internal error", command=command, verbose=verbose)
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        _report_failure(exc, "Unexpected error", command=command, verbose=verbose)


def _report_failure(exc: Exception, label: str, *, command: str, verbose: bool) -> NoReturn:
    """Log *exc*, print ``"<label>: <message>"`` to stderr, and exit 1.

    The traceback is printed only when *verbose* is set.
    """
    logger.error(
        label,
        extra={"command": command, "error": str(exc), "error_type": type(exc).__name__},
    )
    click.echo(f"{label}: {exc}", err=True)
    if verbose:
        lib_cli_exit_tools.print_exception_message(trace_back=True, length_limit=TRACEBACK_VERBOSE_LIMIT)
    raise SystemExit(ExitCode.GENERAL_ERROR)


def last_positional(values: Sequence[str]) -> str | None:
    """Return the last positional value, or None when there are none.

    Example:
        >>> last_positional(("Alice", "Bob"))
        'Bob'
        >>> last_positional(()) is None
        True
    """
    return values[-1] if values else None


__all__ = [
    "StrictCommand",
    "diagnose",
    "execute_with_error_handling",
    "last_positional",
    "raise_invalid_argument",
]
