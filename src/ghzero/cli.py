"""Root CLI group for ghz with global flags and command registration."""

from __future__ import annotations

import click

from ghzero import __version__
from ghzero.commands import register_commands
from ghzero.commands._base import GhzGroup
from ghzero.commands._context import AppContext
from ghzero.config.settings import GhzSettings


@click.group(
    cls=GhzGroup,
    invoke_without_command=True,
    examples="""\
  ghz repos --type owner --limit 5
  ghz clone octocat/Hello-World
  ghz issues list octocat/Hello-World --state all
  ghz -v --log-json repos --format json""",
)
@click.version_option(version=__version__, prog_name="ghz")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """ghz — GitHub Zero: repositories, clones, and issues from the terminal."""
    ctx.ensure_object(dict)
    settings = GhzSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
