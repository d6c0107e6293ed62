"""The ``helloworld`` command group.

Every run passes through :func:`cli` first: it builds the services, resolves
configuration (profile plus ``--set``), starts logging and leaves a
:class:`~helloworld.adapters.cli.context.CLIContext` behind for the
subcommand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from helloworld import __init__conf__
from helloworld.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from helloworld.composition import AppServices


def _build_services(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. Pass obj=build_production when invoking the group.")
    return factory()


def _bootstrap(
    ctx: click.Context,
    *,
    traceback: bool,
    profile: str | None,
    set_overrides: tuple[str, ...],
) -> CLIContext:
    services = _build_services(ctx)
    try:
        config = apply_overrides(services.get_config(profile=profile), set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    services.init_logging(config)
    return CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full Python traceback when a command fails",
)
@click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Read configuration from the named profile directory",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value (repeatable), e.g. greeter.default_name=Ada.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Greet by time of day and print a few facts about the world.

    Example:
        >>> from click.testing import CliRunner
        >>> from helloworld.composition import build_production
        >>> result = CliRunner().invoke(cli, ["hello", "Ada"], obj=build_production)
        >>> result.exit_code
        0
        >>> "Ada" in result.output
        True
    """
    store_cli_context(ctx, _bootstrap(ctx, traceback=traceback, profile=profile, set_overrides=set_overrides))
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported late: the command modules reach back into this package.
    from .commands import cli_config, cli_hello, cli_info, cli_world

    for command in (cli_hello, cli_world, cli_info, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
