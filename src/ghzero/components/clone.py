"""CloneComponent — clone a repository with the system ``git``.

Failures from ``git clone`` are classified by scanning its combined
output for a handful of well-known phrases. Anything unrecognized is
reported verbatim.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any

from ghzero.components.base import (
    FORMAT_FIELD,
    Component,
    ComponentMetadata,
    FieldSpec,
    FieldType,
    ParamSchema,
)
from ghzero.components.errors import CloneError
from ghzero.config.models import GitHubConfig
from ghzero.infrastructure import git
from ghzero.infrastructure.github import GitHubGateway

# (phrase in git output, message reported to the user)
_KNOWN_FAILURES: tuple[tuple[str, str], ...] = (
    (
        "Repository not found",
        "Repository not found. Check the repository name and your access permissions.",
    ),
    ("Permission denied", "Permission denied. Check your GitHub token or SSH key setup."),
    ("already exists", "Directory already exists and is not empty."),
    ("Could not resolve host", "Network error. Check your internet connection."),
)


def resolve_clone_url(repository: str, web_url: str = "https://github.com") -> str:
    """Turn a URL, ``owner/repo`` or bare name into a clone URL."""
    if repository.startswith(("https://", "git@")):
        return repository
    name = repository.strip("/").removesuffix(".git")
    return f"{web_url.rstrip('/')}/{name}.git"


def default_directory(repository: str) -> str:
    """Last path segment of *repository* without a ``.git`` suffix."""
    tail = PurePosixPath(repository.rstrip("/").split(":")[-1]).name
    return tail.removesuffix(".git")


def classify_clone_output(output: str) -> str:
    for phrase, message in _KNOWN_FAILURES:
        if phrase in output:
            return message
    return f"Clone failed: {output.strip()}"


class CloneComponent(Component):
    metadata = ComponentMetadata(
        name="clone",
        description="Clone GitHub repositories",
        category="repository",
    )
    schema = ParamSchema(
        properties={
            "repository": FieldSpec(
                type=FieldType.STRING,
                description="Repository identifier (owner/repo or URL)",
            ),
            "directory": FieldSpec(type=FieldType.STRING, description="Target directory"),
            "force": FieldSpec(
                type=FieldType.BOOLEAN,
                default=False,
                description="Clone even if the directory exists",
            ),
            "format": FORMAT_FIELD,
        },
        required=("repository",),
    )

    def __init__(
        self,
        token: str | None,
        client: GitHubGateway | None = None,
        *,
        github_config: GitHubConfig | None = None,
        cwd: Path | None = None,
    ) -> None:
        super().__init__(token, client, github_config=github_config)
        self._cwd = cwd

    def execute_component(self, params: dict[str, Any]) -> dict[str, Any]:
        repository = params["repository"]
        directory = params.get("directory") or default_directory(repository)
        force = params.get("force", False)
        web_url = (self._github_config or GitHubConfig()).web_url
        clone_url = resolve_clone_url(repository, web_url)

        target = Path(directory)
        if self._cwd is not None and not target.is_absolute():
            target = self._cwd / target
        if target.exists() and not force:
            raise CloneError(
                f"Directory '{directory}' already exists. Use force parameter to override."
            )

        try:
            run = git.run_git_clone(clone_url, directory, cwd=self._cwd)
        except FileNotFoundError as exc:
            raise CloneError("git executable not found") from exc

        if not run.ok:
            raise CloneError(classify_clone_output(run.output), output=run.output)

        return {
            "repository": repository,
            "clone_url": clone_url,
            "directory": directory,
            "command": " ".join(run.args),
            "output": run.lines,
            "success": True,
        }
