"""Interactive pickers shared by ``repos`` and ``clone``."""

from __future__ import annotations

from typing import Any

import click

from ghzero.output.renderers import repo_choice_label

MANUAL_ENTRY = 0


def pick_repository(
    repos: list[dict[str, Any]],
    label: str,
    *,
    allow_manual: bool = False,
) -> dict[str, Any] | None:
    """Show a numbered list and return the chosen repository record.

    Returns None when the user picks manual entry (index 0).
    """
    if allow_manual:
        click.echo(f"  {MANUAL_ENTRY}. ⌨️  Enter repository manually")
    for index, repo in enumerate(repos, start=1):
        click.echo(f"  {index}. {repo_choice_label(repo)}")

    lowest = MANUAL_ENTRY if allow_manual else 1
    choice = click.prompt(label, type=click.IntRange(lowest, len(repos)), default=1)
    if choice == MANUAL_ENTRY:
        return None
    return repos[choice - 1]


def prompt_repository_name() -> str | None:
    """Ask for a repository identifier; blank input means none."""
    raw = click.prompt(
        "📝 Enter repository (owner/repo or full URL)",
        default="",
        show_default=False,
    )
    return raw.strip() or None
