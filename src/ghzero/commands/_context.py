"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds components with the resolved token and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import click

from ghzero.components.errors import echo_failure
from ghzero.output.formatters import format_result

if TYPE_CHECKING:
    from ghzero.components.base import Component
    from ghzero.components.result import ComponentResult
    from ghzero.config.settings import GhzSettings

C = TypeVar("C", bound="Component")


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Components build their
    GitHub client lazily, so ``--help`` and ``--version`` never touch the
    network.
    """

    def __init__(self, settings: GhzSettings) -> None:
        self.settings = settings

        from ghzero.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def can_prompt(self) -> bool:
        """False when ``--no-interact`` was given."""
        return not self.settings.no_interact

    def component(self, component_cls: type[C], **kwargs: Any) -> C:
        """Construct *component_cls* with the configured token injected."""
        return component_cls(
            self.settings.github_token,
            github_config=self.settings.github,
            **kwargs,
        )

    def emit(self, result: ComponentResult, *, op: str, output_format: str = "text") -> None:
        """Format and output a ComponentResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes the error (and a hint in text mode) to stderr and
          exits with the result's error code.
        """
        if result.is_success():
            click.echo(format_result(result, op=op, output_format=output_format))
            return

        if output_format == "json":
            click.echo(format_result(result, op=op, output_format=output_format), err=True)
        else:
            echo_failure(result.get_error(), result.get_error_code())
        raise SystemExit(result.get_error_code())
