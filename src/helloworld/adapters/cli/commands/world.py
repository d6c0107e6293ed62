"""World-facts command.

Contents:
    * :func:`cli_world` - Greet the world and print the facts report.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from helloworld.application.ports import Clock
from helloworld.domain.behaviors import DEFAULT_NAME, generate_greeting
from helloworld.domain.world import generate_world_info, validate_world_output

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._common import StrictCommand, diagnose, execute_with_error_handling

logger = logging.getLogger(__name__)


def _compose_world_output(clock: Clock, *, verbose: bool) -> tuple[str, str]:
    """Build and self-check the greeting and facts report."""
    greeting = generate_greeting(DEFAULT_NAME, now=clock())
    world_info = generate_world_info()
    validate_world_output(greeting, world_info)
    diagnose(verbose, "world: output validation passed")
    return greeting, world_info


@click.command("world", cls=StrictCommand, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Write diagnostics to stderr")
@click.pass_context
def cli_world(ctx: click.Context, verbose: bool) -> None:
    """Greet the world, then print population, language, and continent facts.

    \b
    Examples:
      helloworld world
      helloworld world --verbose
    """
    cli_ctx = get_cli_context(ctx)

    with lib_log_rich.runtime.bind(job_id="cli-world", extra={"command": "world"}):
        logger.info("Generating world information")
        diagnose(verbose, "world: generating world information")
        greeting, world_info = execute_with_error_handling(
            ctx,
            lambda: _compose_world_output(cli_ctx.services.clock, verbose=verbose),
            command="world",
            verbose=verbose,
        )
        click.echo(greeting)
        click.echo(world_info, nl=False)


__all__ = ["cli_world"]
