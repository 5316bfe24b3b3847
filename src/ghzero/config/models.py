"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ghz.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GitHubConfig(BaseModel):
    """[github] section."""

    model_config = {"frozen": True}

    api_url: str = "https://api.github.com"
    web_url: str = "https://github.com"
    timeout: int = 15


class ReposConfig(BaseModel):
    """[repos] section."""

    model_config = {"frozen": True}

    type: str = "all"
    sort: str = "updated"
    limit: int = Field(default=10, ge=1, le=100)
    interactive_limit: int = Field(default=20, ge=1, le=100)


class IssuesConfig(BaseModel):
    """[issues] section."""

    model_config = {"frozen": True}

    state: str = "open"
    limit: int = Field(default=10, ge=1, le=100)
