"""Thin wrappers around the ``git`` executable.

``git`` runs synchronously with no timeout. A missing binary surfaces as
``FileNotFoundError`` from :func:`run_git_clone`; callers decide how to
report it.
"""

from __future__ import annotations

import logging
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

_GITHUB_REMOTE = re.compile(r"github\.com[/:]([^/]+/[^/]+?)(?:\.git)?/?$")


@dataclass(frozen=True)
class GitRun:
    """Outcome of a git invocation with stderr folded into stdout."""

    args: list[str]
    returncode: int
    output: str = ""
    lines: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_git_clone(clone_url: str, directory: str, *, cwd: Path | None = None) -> GitRun:
    """Run ``git clone -- <clone_url> <directory>`` and capture combined output."""
    args = ["git", "clone", "--", clone_url, directory]
    logger.debug("Running %s", " ".join(args))
    proc = subprocess.run(
        args,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=False,
    )
    output = proc.stdout or ""
    return GitRun(
        args=args,
        returncode=proc.returncode,
        output=output,
        lines=output.splitlines(),
    )


def parse_github_remote(url: str) -> str | None:
    """Extract ``owner/repo`` from a GitHub remote URL (HTTPS or SSH)."""
    match = _GITHUB_REMOTE.search(url.strip())
    return match.group(1) if match else None


def detect_github_repository(cwd: Path | None = None) -> str | None:
    """Return ``owner/repo`` for the ``origin`` remote of the repo at *cwd*.

    Returns None when *cwd* is not a git checkout, has no ``origin``, the
    remote is not on GitHub, or git is not installed.
    """
    root = cwd or Path.cwd()
    if not (root / ".git").exists():
        return None
    try:
        proc = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            cwd=root,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("git executable not found while detecting remote")
        return None
    if proc.returncode != 0:
        return None
    return parse_github_remote(proc.stdout)
