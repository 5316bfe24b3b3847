"""Tests for text/JSON result formatting."""

from __future__ import annotations

import json

from ghzero.components.result import ComponentResult
from ghzero.output.formatters import format_result
from tests.conftest import make_repo


class TestJsonFormat:
    def test_success_dumps_data_only(self) -> None:
        result = ComponentResult.success([make_repo()], {"name": "repos"})
        parsed = json.loads(format_result(result, op="repos", output_format="json"))
        assert isinstance(parsed, list)
        assert parsed[0]["full_name"] == "octocat/Hello-World"

    def test_success_is_indented_and_unicode(self) -> None:
        result = ComponentResult.success({"title": "Crash ✨"})
        text = format_result(result, op="issues_create", output_format="json")
        assert text == '{\n  "title": "Crash ✨"\n}'

    def test_empty_list(self) -> None:
        result = ComponentResult.success([])
        assert format_result(result, op="repos", output_format="json") == "[]"

    def test_failure_dumps_envelope(self) -> None:
        result = ComponentResult.failure("Not Found", 404)
        parsed = json.loads(format_result(result, op="repos", output_format="json"))
        assert parsed["ok"] is False
        assert parsed["error"] == {"message": "Not Found", "code": 404}
        assert "timestamp" in parsed


class TestTextFormat:
    def test_success_uses_renderer(self) -> None:
        result = ComponentResult.success([make_repo()])
        assert "📚 Your Repositories:" in format_result(result, op="repos")

    def test_failure_line(self) -> None:
        result = ComponentResult.failure("Not Found", 404)
        assert format_result(result, op="repos") == "❌ Not Found"
