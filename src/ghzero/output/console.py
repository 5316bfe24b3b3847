"""Rich console, theme and style lookups for ghz text output.

Consoles write into a StringIO so renderers can return plain strings.
Rich drops ANSI codes on its own when the buffer is not a terminal, which
keeps CliRunner output and pipes clean.
"""

from __future__ import annotations

import re
from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

GHZ_THEME = Theme(
    {
        "ghz.ok": "bold green",
        "ghz.error": "bold red",
        "ghz.header": "bold cyan",
        "ghz.rule": "dim",
        "ghz.index": "yellow",
        "ghz.name": "bold green",
        "ghz.number": "bold blue",
        "ghz.url": "underline blue",
        "ghz.meta": "dim",
        "ghz.label": "magenta",
        "ghz.state.open": "green",
        "ghz.state.closed": "red",
    }
)

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


def create_console(*, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=GHZ_THEME,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console made by :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def state_marker(state: str | None) -> str:
    return "🟢" if state == "open" else "🔴"


def style_for_state(state: str | None) -> str:
    return "ghz.state.open" if state == "open" else "ghz.state.closed"


def label_style(color: str | None) -> str:
    """GitHub label colors are bare hex (``d73a4a``); fall back to the theme."""
    if color and _HEX_COLOR.match(color):
        return f"#{color.lower()}"
    return "ghz.label"
