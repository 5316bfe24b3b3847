"""GitHub gateway backed by PyGithub.

Components talk to GitHub through the :class:`GitHubGateway` protocol and
receive plain JSON-like mappings shaped like the REST payloads. PyGithub
objects never leave this module.

Attributes are read directly from listed objects rather than via
``raw_data``, which would trigger one extra request per item.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import datetime
from enum import StrEnum
from itertools import islice
from typing import Any, Protocol

import requests
from github import Auth, BadCredentialsException, Github, GithubException

from ghzero.components.errors import GitHubApiError
from ghzero.config.models import GitHubConfig

logger = logging.getLogger(__name__)


class RepoType(StrEnum):
    """Repository affiliation filter accepted by ``GET /user/repos``."""

    ALL = "all"
    OWNER = "owner"
    PUBLIC = "public"
    PRIVATE = "private"
    MEMBER = "member"


class RepoSort(StrEnum):
    """Sort keys accepted by ``GET /user/repos``."""

    CREATED = "created"
    UPDATED = "updated"
    PUSHED = "pushed"
    FULL_NAME = "full_name"


class GitHubGateway(Protocol):
    """The GitHub operations components depend on."""

    def list_repositories(self, type: RepoType, sort: RepoSort, per_page: int) -> Any: ...

    def list_issues(self, repository: str, state: str, per_page: int) -> list[dict[str, Any]]: ...

    def create_issue(
        self,
        repository: str,
        title: str,
        body: str,
        *,
        labels: Sequence[str] | None = None,
        assignees: Sequence[str] | None = None,
    ) -> dict[str, Any]: ...

    def get_issue(self, repository: str, number: int) -> dict[str, Any]: ...


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _user_payload(user: Any) -> dict[str, Any] | None:
    if user is None:
        return None
    return {"login": user.login, "id": user.id, "avatar_url": user.avatar_url}


def repo_payload(repo: Any) -> dict[str, Any]:
    """Serialize a PyGithub ``Repository`` to a REST-shaped mapping."""
    return {
        "id": repo.id,
        "name": repo.name,
        "full_name": repo.full_name,
        "description": repo.description,
        "language": repo.language,
        "private": repo.private,
        "clone_url": repo.clone_url,
        "html_url": repo.html_url,
        "created_at": _iso(repo.created_at),
        "updated_at": _iso(repo.updated_at),
        "pushed_at": _iso(repo.pushed_at),
        "stargazers_count": repo.stargazers_count,
        "watchers_count": repo.watchers_count,
        "forks_count": repo.forks_count,
    }


def issue_payload(issue: Any) -> dict[str, Any]:
    """Serialize a PyGithub ``Issue`` to a REST-shaped mapping."""
    return {
        "id": issue.id,
        "number": issue.number,
        "title": issue.title,
        "body": issue.body,
        "state": issue.state,
        "user": _user_payload(issue.user),
        "labels": [{"name": label.name, "color": label.color} for label in issue.labels or []],
        "assignees": [{"login": a.login, "id": a.id} for a in issue.assignees or []],
        "html_url": issue.html_url,
        "created_at": _iso(issue.created_at),
        "updated_at": _iso(issue.updated_at),
    }


def _api_message(exc: GithubException) -> str:
    data = exc.data
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(data) if data else "request failed"


@contextmanager
def _translate_errors() -> Iterator[None]:
    """Re-raise PyGithub and transport failures as :class:`GitHubApiError`."""
    try:
        yield
    except BadCredentialsException as exc:
        raise GitHubApiError(
            f"GitHub API Error: authentication failed: {_api_message(exc)} (HTTP {exc.status})"
        ) from exc
    except GithubException as exc:
        raise GitHubApiError(f"GitHub API Error: {_api_message(exc)} (HTTP {exc.status})") from exc
    except requests.exceptions.RequestException as exc:
        raise GitHubApiError(f"Network error: {exc}") from exc


class GitHubClient:
    """PyGithub-backed implementation of :class:`GitHubGateway`."""

    def __init__(self, token: str, config: GitHubConfig | None = None) -> None:
        self._config = config or GitHubConfig()
        self._gh = Github(
            auth=Auth.Token(token),
            base_url=self._config.api_url,
            timeout=self._config.timeout,
        )

    def list_repositories(
        self, type: RepoType, sort: RepoSort, per_page: int
    ) -> list[dict[str, Any]]:
        logger.debug("Listing repositories type=%s sort=%s per_page=%d", type, sort, per_page)
        with _translate_errors():
            repos = self._gh.get_user().get_repos(type=str(type), sort=str(sort))
            return [repo_payload(repo) for repo in islice(repos, per_page)]

    def list_issues(self, repository: str, state: str, per_page: int) -> list[dict[str, Any]]:
        logger.debug("Listing issues repo=%s state=%s per_page=%d", repository, state, per_page)
        with _translate_errors():
            issues = self._gh.get_repo(repository).get_issues(state=state)
            return [issue_payload(issue) for issue in islice(issues, per_page)]

    def create_issue(
        self,
        repository: str,
        title: str,
        body: str,
        *,
        labels: Sequence[str] | None = None,
        assignees: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"title": title, "body": body}
        if labels:
            kwargs["labels"] = list(labels)
        if assignees:
            kwargs["assignees"] = list(assignees)
        logger.debug("Creating issue repo=%s title=%r", repository, title)
        with _translate_errors():
            issue = self._gh.get_repo(repository).create_issue(**kwargs)
            return issue_payload(issue)

    def get_issue(self, repository: str, number: int) -> dict[str, Any]:
        logger.debug("Fetching issue repo=%s number=%d", repository, number)
        with _translate_errors():
            return issue_payload(self._gh.get_repo(repository).get_issue(number))
