"""Click base classes shared by every ghz command.

``GhzCommand`` and ``GhzGroup`` take an ``examples=`` string that an eager
``--examples`` flag prints before any other processing, so examples work
even without a token or config file. Commands created with
``output_format=True`` also receive ``--format text|json``, passed to the
callback as ``output_format``.
"""

from __future__ import annotations

from typing import Any

import click

from ghzero.output.formatters import OUTPUT_FORMATS


def _print_examples(examples: str) -> Any:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return callback


def examples_option(examples: str) -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples(examples),
        help="Show usage examples.",
    )


def format_option() -> click.Option:
    return click.Option(
        ["--format", "output_format"],
        type=click.Choice(OUTPUT_FORMATS),
        default="text",
        show_default=True,
        help="Output format.",
    )


class GhzCommand(click.Command):
    """Command with optional ``--examples`` and ``--format`` options."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        output_format: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if output_format:
            self.params.append(format_option())
        if examples:
            self.params.append(examples_option(examples))


class GhzGroup(click.Group):
    """Group whose subcommands default to :class:`GhzCommand`."""

    command_class = GhzCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option(examples))
