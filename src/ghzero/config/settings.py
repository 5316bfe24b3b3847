"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GHZ_*`` prefix, token from ``GITHUB_TOKEN`` / ``GH_TOKEN``
  3. TOML file    — ``ghz.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The access token is resolved here and nowhere else. Components receive it
as an explicit constructor argument.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ghzero.config.discovery import find_config
from ghzero.config.models import GitHubConfig, IssuesConfig, ReposConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``ghz.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
        # Tokens never come from a file.
        self._data.pop("github_token", None)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class GhzSettings(BaseSettings):
    """Unified settings for the ghz CLI.

    Stored on the :class:`~ghzero.commands._context.AppContext` created by
    the root group.

    Attributes:
        github_token: Personal access token, or None when not configured.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GHZ_",
        "env_nested_delimiter": "__",
    }

    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("github_token", "GITHUB_TOKEN", "GH_TOKEN"),
    )
    config_path: Path | None = None

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    repos: ReposConfig = Field(default_factory=ReposConfig)
    issues: IssuesConfig = Field(default_factory=IssuesConfig)

    @field_validator("github_token")
    @classmethod
    def _blank_token_is_missing(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> GhzSettings:
        """Construct settings from a CLI invocation.

        Discovers ``ghz.toml`` via walk-up from *cwd* (or uses the explicit
        *config_path*) and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(cwd)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
