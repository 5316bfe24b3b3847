"""Operation-specific Rich renderers for successful ComponentResults.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by operation name in :func:`render_result`.
Unknown operations fall through to a generic key-value renderer.
User-supplied strings are always wrapped in ``Text`` so that brackets in
titles or descriptions are never parsed as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text

from ghzero.output.console import (
    create_console,
    get_output,
    label_style,
    state_marker,
    style_for_state,
)

if TYPE_CHECKING:
    from rich.console import Console

    from ghzero.components.result import ComponentResult


RULE = "═══════════════════════════════════"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ComponentResult, op: str) -> str:
    """Render a successful ComponentResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    renderer = _OP_RENDERERS.get(op, _render_generic)
    renderer(result.get_data(), console)
    return get_output(console).rstrip("\n")


def render_header(title: str) -> str:
    """Render a section banner (emoji title plus rule)."""
    console = create_console()
    console.print()
    console.print(title, style="ghz.header")
    console.print(RULE, style="ghz.rule")
    return get_output(console)


# ── Helpers ───────────────────────────────────────────────────────────


def _visibility(repo: dict[str, Any]) -> str:
    return "🔒" if repo.get("private") else "🌍"


def _language(repo: dict[str, Any]) -> str:
    language = repo.get("language")
    return f"({language})" if language else ""


def repo_choice_label(repo: dict[str, Any]) -> str:
    """One-line label used in listings and interactive pickers."""
    return f"{_visibility(repo)} {repo.get('full_name', '')} {_language(repo)}".rstrip()


def _names(items: list[dict[str, Any]], key: str) -> str:
    return ", ".join(str(item.get(key, "")) for item in items)


def _label_text(labels: list[dict[str, Any]]) -> Text:
    """Label names, each in its GitHub color."""
    text = Text()
    for position, label in enumerate(labels):
        if position:
            text.append(", ")
        text.append(str(label.get("name", "")), style=label_style(label.get("color")))
    return text


# ── Repository renderers ──────────────────────────────────────────────


def _render_repos(data: Any, console: Console) -> None:
    if not data:
        console.print("📭 No repositories found matching your criteria.")
        return

    console.print("📚 Your Repositories:", style="ghz.header")
    console.print()
    for index, repo in enumerate(data, start=1):
        line = Text()
        line.append(f"{index}.", style="ghz.index")
        line.append(f" {_visibility(repo)} ")
        line.append(str(repo.get("full_name", "")), style="ghz.name")
        language = _language(repo)
        if language:
            line.append(f" {language}")
        console.print(line)
        if repo.get("description"):
            console.print(Text(f"   {repo['description']}"))
        console.print()


def _render_clone(data: Any, console: Console) -> None:
    console.print(Text(f"✅ Successfully cloned {data.get('repository', '')}!", style="ghz.ok"))
    console.print(Text(f"📁 Directory: {data.get('directory', '')}"))
    console.print(Text(f"🔗 {data.get('clone_url', '')}", style="ghz.url"))


# ── Issue renderers ───────────────────────────────────────────────────


def _render_issue_list(data: Any, console: Console) -> None:
    console.print("🐛 GitHub Issues", style="ghz.header")
    console.print("═══════════════════", style="ghz.rule")
    console.print()

    if not data:
        console.print("📭 No issues found")
        return

    for index, issue in enumerate(data, start=1):
        line = Text()
        line.append(f"{index}. {state_marker(issue.get('state'))} ")
        line.append(f"#{issue.get('number')}", style="ghz.number")
        line.append(f": {issue.get('title', '')}")
        console.print(line)

        labels = issue.get("labels") or []
        if labels:
            console.print(Text("   🏷️  ").append_text(_label_text(labels)))

        author = (issue.get("user") or {}).get("login") or "unknown"
        console.print(Text(f"   👤 {author} • {issue.get('created_at', '')}", style="ghz.meta"))
        console.print()


def _render_issue_created(data: Any, console: Console) -> None:
    console.print("✅ Issue created successfully!", style="ghz.ok")
    console.print(Text(f"🔗 {data.get('html_url', '')}", style="ghz.url"))
    console.print(Text(f"📋 #{data.get('number')}: {data.get('title', '')}"))


def _render_issue_detail(data: Any, console: Console) -> None:
    state = data.get("state") or ""
    state_label = "🟢 Open" if state == "open" else "🔴 Closed"
    author = (data.get("user") or {}).get("login") or "unknown"

    lines = Text()
    lines.append(f"📝 Title: {data.get('title', '')}\n")
    lines.append(f"🔗 URL: {data.get('html_url', '')}\n")
    lines.append("📊 State: ")
    lines.append(state_label, style=style_for_state(state))
    lines.append(f"\n👤 Author: {author}\n")
    lines.append(f"📅 Created: {data.get('created_at', '')}")

    labels = data.get("labels") or []
    if labels:
        lines.append("\n🏷️  Labels: ")
        lines.append_text(_label_text(labels))
    assignees = data.get("assignees") or []
    if assignees:
        lines.append(f"\n👥 Assignees: {_names(assignees, 'login')}")

    lines.append("\n\n📄 Description:\n───────────────\n")
    lines.append(data.get("body") or "No description provided.")

    title = f"📋 Issue #{data.get('number')}"
    console.print(Panel(lines, title=title, border_style="ghz.rule", expand=False))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(data: Any, console: Console) -> None:
    if isinstance(data, dict):
        for key, value in data.items():
            console.print(Text(f"  {key}: ", style="ghz.meta"), Text(str(value)), sep="")
    elif isinstance(data, list):
        for item in data:
            console.print(Text(f"  - {item}"))
    elif data:
        console.print(Text(str(data)))


_OP_RENDERERS: dict[str, Any] = {
    "repos": _render_repos,
    "clone": _render_clone,
    "issues_list": _render_issue_list,
    "issues_create": _render_issue_created,
    "issues_show": _render_issue_detail,
}
