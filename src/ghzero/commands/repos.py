"""Command: list repositories, optionally picking one to clone."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from ghzero.commands._base import GhzCommand
from ghzero.commands._prompts import pick_repository
from ghzero.components.clone import CloneComponent
from ghzero.components.repos import MAX_LIMIT, ReposComponent
from ghzero.infrastructure.github import RepoSort, RepoType
from ghzero.output.renderers import render_header

if TYPE_CHECKING:
    from ghzero.commands._context import AppContext

REPO_TYPES = [str(t) for t in RepoType]
REPO_SORTS = [str(s) for s in RepoSort]


def _offer_clone(app: AppContext, repos: list[dict[str, Any]]) -> None:
    """Let the user clone one of the listed repositories."""
    selected = pick_repository(repos, "🎯 Select a repository to clone")
    if selected is None:
        return
    if not click.confirm(f"🚀 Clone {selected['full_name']}?", default=True):
        return

    click.echo(f"🔄 Cloning {selected['clone_url']}...")
    result = app.component(CloneComponent).execute({"repository": selected["clone_url"]})
    app.emit(result, op="clone")


@click.command(
    cls=GhzCommand,
    output_format=True,
    examples="""\
  ghz repos
  ghz repos --type public --sort pushed --limit 5
  ghz repos --format json
  ghz repos --interactive""",
)
@click.option(
    "--type",
    "repo_type",
    type=click.Choice(REPO_TYPES),
    default=None,
    help="Repository type filter.",
)
@click.option("--sort", type=click.Choice(REPO_SORTS), default=None, help="Sort order.")
@click.option("--limit", type=int, default=None, help="Number of repositories (1-100).")
@click.option("--interactive", is_flag=True, help="Use interactive prompts.")
@click.pass_obj
def repos(
    app: AppContext,
    repo_type: str | None,
    sort: str | None,
    limit: int | None,
    output_format: str,
    interactive: bool,
) -> None:
    """List and interact with your GitHub repositories."""
    defaults = app.settings.repos
    interactive = interactive and app.can_prompt
    text_mode = output_format == "text"

    if text_mode:
        click.echo(render_header("🐙 GitHub Zero - Repository Manager"))

    if interactive:
        repo_type = click.prompt(
            "📋 What type of repositories?",
            type=click.Choice(REPO_TYPES),
            default=repo_type or defaults.type,
        )
        sort = click.prompt(
            "🔄 How should we sort them?",
            type=click.Choice(REPO_SORTS),
            default=sort or defaults.sort,
        )
        limit = click.prompt(
            "🔢 How many repositories?",
            type=click.IntRange(1, MAX_LIMIT),
            default=limit or defaults.limit,
        )
    else:
        limit = max(1, min(MAX_LIMIT, limit if limit is not None else defaults.limit))

    result = app.component(ReposComponent).execute(
        {
            "type": repo_type or defaults.type,
            "sort": sort or defaults.sort,
            "limit": limit,
            "format": output_format,
        }
    )
    app.emit(result, op="repos", output_format=output_format)

    if interactive and text_mode and result.get_data():
        _offer_clone(app, result.get_data())
