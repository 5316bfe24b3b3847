"""Tests for ReposComponent."""

from __future__ import annotations

import pytest

from ghzero.components.repos import (
    REPO_FIELDS,
    ReposComponent,
    map_repo_sort,
    map_repo_type,
    normalize_repo,
)
from ghzero.infrastructure.github import RepoSort, RepoType
from tests.conftest import TOKEN, FakeGitHub, make_repo


class TestMappings:
    @pytest.mark.parametrize("value", ["all", "owner", "public", "private", "member"])
    def test_known_types(self, value: str) -> None:
        assert map_repo_type(value) == value

    @pytest.mark.parametrize("value", ["forks", "", None])
    def test_unknown_type_falls_back(self, value: str | None) -> None:
        assert map_repo_type(value) is RepoType.ALL

    @pytest.mark.parametrize("value", ["created", "updated", "pushed", "full_name"])
    def test_known_sorts(self, value: str) -> None:
        assert map_repo_sort(value) == value

    def test_unknown_sort_falls_back(self) -> None:
        assert map_repo_sort("stars") is RepoSort.UPDATED


class TestNormalize:
    def test_keeps_only_record_fields(self) -> None:
        record = normalize_repo({**make_repo(), "owner": {"login": "octocat"}})
        assert tuple(record) == REPO_FIELDS

    def test_missing_fields_are_none(self) -> None:
        record = normalize_repo({"full_name": "a/b"})
        assert record["description"] is None
        assert record["private"] is False

    def test_private_is_boolean(self) -> None:
        assert normalize_repo({"private": 1})["private"] is True


class TestReposComponent:
    def test_defaults(self) -> None:
        fake = FakeGitHub()
        result = ReposComponent(TOKEN, fake).execute({})
        assert result.is_success()
        assert fake.calls == [("list_repositories", (RepoType.ALL, RepoSort.UPDATED, 10), {})]
        assert result.metadata["name"] == "repos"
        assert result.metadata["category"] == "repository"

    def test_passes_filters(self) -> None:
        fake = FakeGitHub()
        ReposComponent(TOKEN, fake).execute({"type": "owner", "sort": "pushed", "limit": 5})
        assert fake.calls[0][1] == (RepoType.OWNER, RepoSort.PUSHED, 5)

    def test_none_values_take_defaults(self) -> None:
        fake = FakeGitHub()
        result = ReposComponent(TOKEN, fake).execute({"type": None, "sort": None, "limit": None})
        assert result.is_success()
        assert fake.calls == [("list_repositories", (RepoType.ALL, RepoSort.UPDATED, 10), {})]

    def test_public_five(self) -> None:
        fake = FakeGitHub()
        fake.repos = [make_repo(f"octocat/p{i}", private=0) for i in range(5)]
        result = ReposComponent(TOKEN, fake).execute({"type": "public", "limit": 5})
        records = result.get_data()
        assert len(records) == 5
        assert all(r["full_name"].startswith("octocat/p") for r in records)
        assert all(r["private"] is False for r in records)
        assert fake.calls[0][1][0] is RepoType.PUBLIC

    def test_respects_limit(self) -> None:
        fake = FakeGitHub()
        fake.repos = [make_repo(f"octocat/r{i}") for i in range(8)]
        result = ReposComponent(TOKEN, fake).execute({"limit": 3})
        assert [r["full_name"] for r in result.get_data()] == [
            "octocat/r0",
            "octocat/r1",
            "octocat/r2",
        ]

    def test_normalizes_records(self) -> None:
        result = ReposComponent(TOKEN, FakeGitHub()).execute({})
        (repo,) = result.get_data()
        assert repo["full_name"] == "octocat/Hello-World"
        assert repo["clone_url"] == "https://github.com/octocat/Hello-World.git"
        assert repo["private"] is False

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_out_of_range(self, limit: int) -> None:
        fake = FakeGitHub()
        result = ReposComponent(TOKEN, fake).execute({"limit": limit})
        assert result.get_error_code() == 422
        assert fake.calls == []

    def test_bad_type_rejected(self) -> None:
        result = ReposComponent(TOKEN, FakeGitHub()).execute({"type": "forks"})
        assert result.get_error_code() == 422
        assert "type must be one of" in result.get_error()

    def test_format_choices(self) -> None:
        comp = ReposComponent(TOKEN, FakeGitHub())
        assert all(comp.validate({"format": fmt}) for fmt in ("json", "array", "text"))
        assert comp.validation_errors({"format": "xml"}) == [
            "format must be one of: json, array, text"
        ]

    def test_empty_listing(self) -> None:
        fake = FakeGitHub()
        fake.repos = []
        result = ReposComponent(TOKEN, fake).execute({})
        assert result.is_success()
        assert result.get_data() == []

    def test_none_listing(self) -> None:
        fake = FakeGitHub()
        fake.repos = None
        assert ReposComponent(TOKEN, fake).execute({}).get_data() == []

    def test_error_payload(self) -> None:
        fake = FakeGitHub()
        fake.repos = {"message": "Bad credentials"}
        result = ReposComponent(TOKEN, fake).execute({})
        assert result.get_error() == "Bad credentials"
        assert result.get_error_code() == 500

    @pytest.mark.parametrize("payload", [{}, "oops", [1, 2]])
    def test_unexpected_shape(self, payload: object) -> None:
        fake = FakeGitHub()
        fake.repos = payload
        result = ReposComponent(TOKEN, fake).execute({})
        assert result.get_error() == "Unexpected API response format"
        assert result.get_error_code() == 500

    def test_missing_token(self) -> None:
        fake = FakeGitHub()
        result = ReposComponent(None, fake).execute({})
        assert result.get_error_code() == 401
        assert fake.calls == []
