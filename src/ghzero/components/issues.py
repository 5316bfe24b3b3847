"""Issue actions (list, create, show) scoped to one repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ghzero.components.base import (
    FORMAT_FIELD,
    Component,
    ComponentMetadata,
    FieldSpec,
    FieldType,
    ParamSchema,
)
from ghzero.components.errors import GhzError, ValidationFailedError

ACTIONS = ("list", "create", "show")
STATES = ("open", "closed", "all")
DEFAULT_STATE = "open"
DEFAULT_LIMIT = 10


def _user(user: Mapping[str, Any] | None) -> dict[str, Any]:
    user = user or {}
    return {
        "login": user.get("login"),
        "id": user.get("id"),
        "avatar_url": user.get("avatar_url"),
    }


def normalize_issue(issue: Mapping[str, Any]) -> dict[str, Any]:
    """Full issue record as rendered by ``issues list`` and ``issues show``."""
    return {
        "id": issue.get("id"),
        "number": issue.get("number"),
        "title": issue.get("title"),
        "body": issue.get("body"),
        "state": issue.get("state"),
        "user": _user(issue.get("user")),
        "labels": [
            {"name": label.get("name"), "color": label.get("color")}
            for label in issue.get("labels") or []
        ],
        "assignees": [
            {"login": assignee.get("login"), "id": assignee.get("id")}
            for assignee in issue.get("assignees") or []
        ],
        "html_url": issue.get("html_url"),
        "created_at": issue.get("created_at"),
        "updated_at": issue.get("updated_at"),
    }


def summarize_created_issue(issue: Mapping[str, Any]) -> dict[str, Any]:
    """Compact record returned after creating an issue."""
    return {
        "id": issue.get("id"),
        "number": issue.get("number"),
        "title": issue.get("title"),
        "body": issue.get("body"),
        "state": issue.get("state"),
        "html_url": issue.get("html_url"),
        "created_at": issue.get("created_at"),
    }


class IssuesComponent(Component):
    metadata = ComponentMetadata(
        name="issues",
        description="Create, list, and manage GitHub issues",
        category="issues",
    )
    schema = ParamSchema(
        properties={
            "action": FieldSpec(
                type=FieldType.STRING,
                enum=ACTIONS,
                default="list",
                description="Action to perform",
            ),
            "repository": FieldSpec(
                type=FieldType.STRING,
                description="Repository name (owner/repo)",
            ),
            "number": FieldSpec(type=FieldType.INTEGER, description="Issue number for show"),
            "title": FieldSpec(type=FieldType.STRING, description="Issue title for create"),
            "body": FieldSpec(type=FieldType.STRING, description="Issue body for create"),
            "labels": FieldSpec(type=FieldType.ARRAY, description="Labels for create"),
            "assignees": FieldSpec(type=FieldType.ARRAY, description="Assignees for create"),
            "state": FieldSpec(
                type=FieldType.STRING,
                enum=STATES,
                default=DEFAULT_STATE,
                description="Issue state filter for list",
            ),
            "limit": FieldSpec(
                type=FieldType.INTEGER,
                minimum=1,
                maximum=100,
                default=DEFAULT_LIMIT,
                description="Number of issues to return for list",
            ),
            "format": FORMAT_FIELD,
        },
        required=("repository",),
    )

    def execute_component(self, params: dict[str, Any]) -> Any:
        action = params["action"]
        repository = params["repository"]

        if action == "list":
            return self._list(repository, params)
        if action == "create":
            return self._create(repository, params)
        if action == "show":
            return self._show(repository, params)
        raise GhzError(f"Unknown action: {action}. Use: list, create, show")

    def _list(self, repository: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        issues = self.client.list_issues(
            repository,
            params["state"],
            params["limit"],
        )
        return [normalize_issue(issue) for issue in issues]

    def _create(self, repository: str, params: dict[str, Any]) -> dict[str, Any]:
        title = params.get("title")
        if not title or not title.strip():
            raise ValidationFailedError("Title is required for creating issues")

        issue = self.client.create_issue(
            repository,
            title,
            params.get("body") or "",
            labels=params.get("labels"),
            assignees=params.get("assignees"),
        )
        return summarize_created_issue(issue)

    def _show(self, repository: str, params: dict[str, Any]) -> dict[str, Any]:
        number = params.get("number")
        if not number:
            raise ValidationFailedError("Issue number is required")
        return normalize_issue(self.client.get_issue(repository, number))
