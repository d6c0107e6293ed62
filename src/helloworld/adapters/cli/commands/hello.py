"""Greeter command.

Contents:
    * :func:`cli_hello` - Greet a name with a time-of-day prefix.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from helloworld.adapters.config.greeter import load_greeter_config
from helloworld.domain.behaviors import generate_greeting

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ._common import (
    StrictCommand,
    diagnose,
    execute_with_error_handling,
    last_positional,
    raise_invalid_argument,
)

logger = logging.getLogger(__name__)


def _configured_default_name(cli_ctx: CLIContext) -> str:
    """Return ``[greeter].default_name``, exiting with CONFIG_ERROR when invalid."""
    try:
        return load_greeter_config(cli_ctx.config).default_name
    except ValidationError as exc:
        click.echo(f"Error: Invalid [greeter] configuration - {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _resolve_name(
    ctx: click.Context,
    cli_ctx: CLIContext,
    names: tuple[str, ...],
    explicit_name: str | None,
) -> str:
    """Pick the name to greet: ``--name``, else the last positional, else the configured default."""
    if explicit_name is not None:
        if not explicit_name:
            raise_invalid_argument(ctx, "Name cannot be empty")
        return explicit_name
    positional = last_positional(names)
    if positional is not None:
        return positional
    return _configured_default_name(cli_ctx)


@click.command("hello", cls=StrictCommand, context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1, metavar="[NAME]")
@click.option(
    "--name",
    "explicit_name",
    default=None,
    metavar="NAME",
    help="Name to greet; wins over NAME even when given before it",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Write diagnostics to stderr")
@click.pass_context
def cli_hello(ctx: click.Context, names: tuple[str, ...], explicit_name: str | None, verbose: bool) -> None:
    """Greet NAME (default: World) with a prefix chosen by the time of day.

    \b
    Examples:
      helloworld hello
      helloworld hello Alice
      helloworld hello --name=Bob --verbose
    """
    cli_ctx = get_cli_context(ctx)
    name = _resolve_name(ctx, cli_ctx, names, explicit_name)

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Generating greeting", extra={"name_length": len(name)})
        diagnose(verbose, f"hello: generating greeting for '{name}'")
        greeting = execute_with_error_handling(
            ctx,
            lambda: generate_greeting(name, now=cli_ctx.services.clock()),
            command="hello",
            verbose=verbose,
        )
        click.echo(greeting)


__all__ = ["cli_hello"]
