"""Tests for ghz.toml discovery."""

from pathlib import Path

import pytest

from ghzero.config.discovery import find_config, user_config_path


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        toml = tmp_path / "ghz.toml"
        toml.write_text("")
        assert find_config(tmp_path) == toml.resolve()

    def test_in_parent(self, tmp_path: Path) -> None:
        toml = tmp_path / "ghz.toml"
        toml.write_text("")
        child = tmp_path / "src" / "pkg"
        child.mkdir(parents=True)
        assert find_config(child) == toml.resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_directory_named_like_config_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "ghz.toml").mkdir()
        assert find_config(tmp_path) is None


class TestEnvOverride:
    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        monkeypatch.setenv("GHZ_CONFIG", str(custom))
        assert find_config(tmp_path / "unrelated") == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "ghz.toml").write_text("")
        monkeypatch.setenv("GHZ_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestUserConfig:
    def test_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        xdg = tmp_path / "xdg"
        user = xdg / "ghz" / "ghz.toml"
        user.parent.mkdir(parents=True)
        user.write_text("")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
        project = tmp_path / "project"
        project.mkdir()
        assert find_config(project) == user

    def test_project_file_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        xdg = tmp_path / "xdg"
        (xdg / "ghz").mkdir(parents=True)
        (xdg / "ghz" / "ghz.toml").write_text("")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
        project = tmp_path / "project"
        project.mkdir()
        (project / "ghz.toml").write_text("")
        assert find_config(project) == (project / "ghz.toml").resolve()

    def test_default_location(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert user_config_path() == tmp_path / ".config" / "ghz" / "ghz.toml"
