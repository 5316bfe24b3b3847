"""Command: list, create, and show issues."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ghzero.commands._base import GhzCommand
from ghzero.components import errors
from ghzero.components.errors import GhzError
from ghzero.components.issues import ACTIONS, STATES, IssuesComponent
from ghzero.infrastructure.git import detect_github_repository

if TYPE_CHECKING:
    from ghzero.commands._context import AppContext


def _split_csv(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    values = [part.strip() for part in raw.split(",") if part.strip()]
    return values or None


def _resolve_repository(repository: str | None) -> str:
    if repository:
        return repository
    detected = detect_github_repository()
    if detected:
        return detected
    raise GhzError("No repository specified and could not detect from current directory")


@click.command(
    cls=GhzCommand,
    output_format=True,
    examples="""\
  ghz issues list octocat/Hello-World
  ghz issues list octocat/Hello-World --state all --limit 20
  ghz issues create octocat/Hello-World --title "Crash on start" --labels bug,p1
  ghz issues show octocat/Hello-World 42
  ghz issues show 42            # repository detected from git remote
  ghz issues list --format json""",
)
@click.argument("action", type=click.Choice(ACTIONS), default="list", required=False)
@click.argument("repository", required=False)
@click.argument("number", type=int, required=False)
@click.option("--title", default=None, help="Issue title (create).")
@click.option("--body", default=None, help="Issue body (create).")
@click.option("--labels", default=None, help="Comma-separated labels (create).")
@click.option("--assignees", default=None, help="Comma-separated assignees (create).")
@click.option("--state", type=click.Choice(STATES), default=None, help="State filter (list).")
@click.option("--limit", type=int, default=None, help="Number of issues (list, 1-100).")
@click.pass_obj
def issues(
    app: AppContext,
    action: str,
    repository: str | None,
    number: int | None,
    title: str | None,
    body: str | None,
    labels: str | None,
    assignees: str | None,
    state: str | None,
    limit: int | None,
    output_format: str,
) -> None:
    """Create, list, and manage GitHub issues.

    REPOSITORY defaults to the GitHub ``origin`` remote of the current directory.
    """
    # `ghz issues show 42` names the issue, not the repository.
    if action == "show" and number is None and repository and repository.isdigit():
        number = int(repository)
        repository = None

    try:
        repository = _resolve_repository(repository)
    except GhzError as exc:
        code = errors.handle(exc)
        click.echo("💡 Usage: ghz issues list owner/repo", err=True)
        click.echo("💡 Or run from within a Git repository", err=True)
        raise SystemExit(code) from exc

    defaults = app.settings.issues
    result = app.component(IssuesComponent).execute(
        {
            "action": action,
            "repository": repository,
            "number": number,
            "title": title,
            "body": body,
            "labels": _split_csv(labels),
            "assignees": _split_csv(assignees),
            "state": state or defaults.state,
            "limit": limit if limit is not None else defaults.limit,
            "format": output_format,
        }
    )
    app.emit(result, op=f"issues_{action}", output_format=output_format)
