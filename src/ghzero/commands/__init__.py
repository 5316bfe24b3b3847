"""Subcommand modules for ghz.

Provides register_commands() which uses deferred imports to keep
``ghz --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from ghzero.commands.clone import clone
    from ghzero.commands.issues import issues
    from ghzero.commands.repos import repos

    cli.add_command(repos)
    cli.add_command(clone)
    cli.add_command(issues)
