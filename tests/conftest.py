"""Shared pytest fixtures and test helpers for ghzero tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from ghzero.components.errors import GitHubApiError

TOKEN = "ghp_test_token"


def make_repo(full_name: str = "octocat/Hello-World", **overrides: Any) -> dict[str, Any]:
    """REST-shaped repository payload."""
    name = full_name.split("/")[1]
    repo = {
        "id": 1296269,
        "name": name,
        "full_name": full_name,
        "description": "My first repository",
        "language": "Python",
        "private": False,
        "clone_url": f"https://github.com/{full_name}.git",
        "html_url": f"https://github.com/{full_name}",
        "created_at": "2011-01-26T19:01:12+00:00",
        "updated_at": "2024-05-01T10:00:00+00:00",
        "pushed_at": "2024-05-01T09:00:00+00:00",
        "stargazers_count": 80,
        "watchers_count": 80,
        "forks_count": 9,
    }
    repo.update(overrides)
    return repo


def make_issue(number: int = 1, **overrides: Any) -> dict[str, Any]:
    """REST-shaped issue payload."""
    issue = {
        "id": 1000 + number,
        "number": number,
        "title": f"Issue {number}",
        "body": "Steps to reproduce",
        "state": "open",
        "user": {"login": "octocat", "id": 583231, "avatar_url": "https://a/octocat.png"},
        "labels": [{"name": "bug", "color": "d73a4a"}],
        "assignees": [{"login": "hubot", "id": 2}],
        "html_url": f"https://github.com/octocat/Hello-World/issues/{number}",
        "created_at": "2024-05-01T10:00:00+00:00",
        "updated_at": "2024-05-02T10:00:00+00:00",
    }
    issue.update(overrides)
    return issue


class FakeGitHub:
    """In-memory gateway recording every call it receives.

    Set ``repos``/``issues`` to control listings, or ``error`` to make every
    call raise it.
    """

    def __init__(self) -> None:
        self.repos: Any = [make_repo()]
        self.issues: list[dict[str, Any]] = [make_issue(1), make_issue(2)]
        self.error: Exception | None = None
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def _record(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, args, kwargs))
        if self.error is not None:
            raise self.error

    def list_repositories(self, type: Any, sort: Any, per_page: int) -> Any:
        self._record("list_repositories", type, sort, per_page)
        if isinstance(self.repos, list):
            return self.repos[:per_page]
        return self.repos

    def list_issues(self, repository: str, state: str, per_page: int) -> list[dict[str, Any]]:
        self._record("list_issues", repository, state, per_page)
        return self.issues[:per_page]

    def create_issue(
        self,
        repository: str,
        title: str,
        body: str,
        *,
        labels: Sequence[str] | None = None,
        assignees: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        self._record("create_issue", repository, title, body, labels=labels, assignees=assignees)
        return make_issue(42, title=title, body=body)

    def get_issue(self, repository: str, number: int) -> dict[str, Any]:
        self._record("get_issue", repository, number)
        for issue in self.issues:
            if issue["number"] == number:
                return issue
        raise GitHubApiError("GitHub API Error: Not Found (HTTP 404)")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep the developer's real token and config out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
    for name in ("GITHUB_TOKEN", "GH_TOKEN", "GHZ_CONFIG", "GHZ_VERBOSE", "GHZ_NO_INTERACT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def token(monkeypatch: pytest.MonkeyPatch) -> str:
    """Export a token the way a user would."""
    monkeypatch.setenv("GITHUB_TOKEN", TOKEN)
    return TOKEN


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def patched_github(fake_github: FakeGitHub, monkeypatch: pytest.MonkeyPatch) -> FakeGitHub:
    """Route every component's lazily-built client to *fake_github*."""
    monkeypatch.setattr(
        "ghzero.components.base.GitHubClient",
        lambda token, config=None: fake_github,
    )
    return fake_github


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp directory (no ghz.toml, no .git).

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
