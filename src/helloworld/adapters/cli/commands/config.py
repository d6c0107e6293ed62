"""``helloworld config``: show the merged configuration and where it came from."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from helloworld.adapters.config.overrides import apply_overrides
from helloworld.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [member.value for member in OutputFormat]


def _config_for_profile(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    # Without its own --profile the command shows what the root group loaded.
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMAT_CHOICES, case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Render as annotated TOML-like text or as JSON",
)
@click.option("--section", default=None, metavar="NAME", help="Limit output to one section, e.g. 'greeter'")
@click.option("--profile", default=None, metavar="NAME", help="Load this profile instead of the root one")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print configuration after defaults, files, env and ``--set`` are merged."""
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = _config_for_profile(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    scope = {"command": "config", "format": fmt.value, "profile": shown_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=scope):
        logger.info("Showing configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
