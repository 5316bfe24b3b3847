"""Command: clone a repository, picking it interactively when none is given."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ghzero.commands._base import GhzCommand
from ghzero.commands._prompts import pick_repository, prompt_repository_name
from ghzero.components.clone import CloneComponent, default_directory
from ghzero.components.errors import ErrorCode
from ghzero.components.repos import ReposComponent
from ghzero.output.renderers import render_header

if TYPE_CHECKING:
    from ghzero.commands._context import AppContext


def _select_repository(app: AppContext) -> str | None:
    """Offer the user's repositories, falling back to manual entry."""
    result = app.component(ReposComponent).execute(
        {"limit": app.settings.repos.interactive_limit}
    )
    if not result.is_success():
        if result.get_error_code() == ErrorCode.TOKEN_MISSING:
            app.emit(result, op="repos")
        click.echo(f"💥 Failed to fetch repositories: {result.get_error()}", err=True)
        return prompt_repository_name()

    repos = result.get_data()
    if not repos:
        click.echo("📭 No repositories found.")
        return prompt_repository_name()

    selected = pick_repository(
        repos, "📥 Which repository would you like to clone?", allow_manual=True
    )
    if selected is None:
        return prompt_repository_name()
    return selected["full_name"]


def _cancel(message: str) -> None:
    click.echo(f"👋 {message}", err=True)
    raise SystemExit(int(ErrorCode.UNKNOWN))


@click.command(
    name="clone",
    cls=GhzCommand,
    output_format=True,
    examples="""\
  ghz clone octocat/Hello-World
  ghz clone https://github.com/octocat/Hello-World.git --directory hello
  ghz clone octocat/Hello-World --force
  ghz clone --interactive""",
)
@click.argument("repo", required=False)
@click.option("--directory", "-d", default=None, help="Directory to clone into.")
@click.option("--force", is_flag=True, help="Clone even if the directory already exists.")
@click.option("--interactive", is_flag=True, help="Use interactive selection.")
@click.pass_obj
def clone(
    app: AppContext,
    repo: str | None,
    directory: str | None,
    force: bool,
    output_format: str,
    interactive: bool,
) -> None:
    """Clone a GitHub repository (owner/repo, bare name, or URL)."""
    prompting = app.can_prompt and (interactive or not repo)
    text_mode = output_format == "text"

    if text_mode:
        click.echo(render_header("📥 GitHub Zero - Clone Repository"))

    if prompting:
        repo = _select_repository(app)
        if not repo:
            _cancel("No repository selected.")

    if prompting and repo and not force:
        target = directory or default_directory(repo)
        if Path(target).exists():
            if not click.confirm(f"📁 Directory '{target}' exists. Continue anyway?", default=False):
                _cancel("Clone cancelled.")
            force = True

    if text_mode and repo:
        click.echo(f"📥 Cloning {repo}...")

    result = app.component(CloneComponent).execute(
        {
            "repository": repo,
            "directory": directory,
            "force": force,
            "format": output_format,
        }
    )
    app.emit(result, op="clone", output_format=output_format)
