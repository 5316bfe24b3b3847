"""List and filter the authenticated user's repositories."""

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
from ghzero.components.errors import GitHubApiError
from ghzero.infrastructure.github import RepoSort, RepoType

DEFAULT_TYPE = "all"
DEFAULT_SORT = "updated"
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

REPO_FIELDS = (
    "id",
    "name",
    "full_name",
    "description",
    "language",
    "private",
    "clone_url",
    "html_url",
    "created_at",
    "updated_at",
    "pushed_at",
    "stargazers_count",
    "watchers_count",
    "forks_count",
)


def map_repo_type(value: str | None) -> RepoType:
    """Unknown or missing values fall back to ``all``."""
    try:
        return RepoType(value)
    except ValueError:
        return RepoType.ALL


def map_repo_sort(value: str | None) -> RepoSort:
    """Unknown or missing values fall back to ``updated``."""
    try:
        return RepoSort(value)
    except ValueError:
        return RepoSort.UPDATED


def normalize_repo(repo: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a repository payload into the record commands render."""
    record = {key: repo.get(key) for key in REPO_FIELDS}
    record["private"] = bool(record["private"])
    return record


class ReposComponent(Component):
    metadata = ComponentMetadata(
        name="repos",
        description="List and filter GitHub repositories",
        category="repository",
    )
    schema = ParamSchema(
        properties={
            "type": FieldSpec(
                type=FieldType.STRING,
                enum=tuple(RepoType),
                default=DEFAULT_TYPE,
                description="Repository type filter",
            ),
            "sort": FieldSpec(
                type=FieldType.STRING,
                enum=tuple(RepoSort),
                default=DEFAULT_SORT,
                description="Sort repositories by",
            ),
            "limit": FieldSpec(
                type=FieldType.INTEGER,
                minimum=1,
                maximum=MAX_LIMIT,
                default=DEFAULT_LIMIT,
                description="Number of repositories to return",
            ),
            "format": FORMAT_FIELD,
        },
    )

    def execute_component(self, params: dict[str, Any]) -> list[dict[str, Any]]:
        payload = self.client.list_repositories(
            map_repo_type(params["type"]),
            map_repo_sort(params["sort"]),
            params["limit"],
        )

        if isinstance(payload, Mapping) and "message" in payload:
            raise GitHubApiError(f"GitHub API Error: {payload['message']}")
        if payload is None or payload == []:
            return []
        if not isinstance(payload, list) or not all(isinstance(r, Mapping) for r in payload):
            raise GitHubApiError("Unexpected API response format")

        return [normalize_repo(repo) for repo in payload]
