"""Error taxonomy and exception classification.

Every failure a command reports passes through :func:`classify`, so exit
codes and hints stay consistent regardless of which GitHub call or git
invocation failed.

Classification is a case-insensitive substring match on the exception
message, first rule wins::

    token / authentication   -> TOKEN_MISSING      (401)
    validation               -> VALIDATION_FAILED  (422)
    not found / 404          -> NOT_FOUND          (404)
    permission / 403         -> PERMISSION_DENIED  (403)
    network / connection     -> NETWORK_ERROR      (503)
    api / github             -> API_ERROR          (500)
    anything else            -> UNKNOWN            (1)
"""

from __future__ import annotations

from enum import IntEnum

import click

from ghzero.components.result import ComponentResult


class ErrorCode(IntEnum):
    """Numeric error codes, also used as process exit statuses."""

    UNKNOWN = 1
    TOKEN_MISSING = 401
    PERMISSION_DENIED = 403
    NOT_FOUND = 404
    VALIDATION_FAILED = 422
    API_ERROR = 500
    NETWORK_ERROR = 503


class GhzError(Exception):
    """Base class for errors raised inside ghz components."""


class ValidationFailedError(GhzError):
    """Parameters did not satisfy a component's schema or action rules."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class TokenMissingError(GhzError):
    """No access token was configured."""

    def __init__(
        self, message: str = "No GitHub token found. Set GITHUB_TOKEN environment variable."
    ) -> None:
        super().__init__(message)


class GitHubApiError(GhzError):
    """The GitHub API rejected a request or returned an unusable payload."""


class CloneError(GhzError):
    """``git clone`` exited non-zero or could not be started."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


# Ordered: the first matching rule wins.
_RULES: tuple[tuple[ErrorCode, tuple[str, ...]], ...] = (
    (ErrorCode.TOKEN_MISSING, ("token", "authentication")),
    (ErrorCode.VALIDATION_FAILED, ("validation",)),
    (ErrorCode.NOT_FOUND, ("not found", "404")),
    (ErrorCode.PERMISSION_DENIED, ("permission", "403")),
    (ErrorCode.NETWORK_ERROR, ("network", "connection")),
    (ErrorCode.API_ERROR, ("api", "github")),
)

_STRIP_PREFIXES = ("GitHub API Error: ", "Error: ")

_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.TOKEN_MISSING: (
        "Set GITHUB_TOKEN environment variable with a valid GitHub personal access token"
    ),
    ErrorCode.VALIDATION_FAILED: "Check your input parameters and try again",
    ErrorCode.NOT_FOUND: "Verify the repository name and your access permissions",
    ErrorCode.PERMISSION_DENIED: "Check your GitHub token permissions or repository access",
    ErrorCode.NETWORK_ERROR: "Check your internet connection and try again",
    ErrorCode.API_ERROR: "Check GitHub status at https://www.githubstatus.com",
}


def classify(exc: BaseException) -> ErrorCode:
    """Map an exception to an :class:`ErrorCode`."""
    message = str(exc).lower()
    for code, needles in _RULES:
        if any(needle in message for needle in needles):
            return code
        if code is ErrorCode.VALIDATION_FAILED and isinstance(exc, ValidationFailedError):
            return code
    return ErrorCode.UNKNOWN


def format_message(exc: BaseException) -> str:
    """Strip boilerplate prefixes and capitalize the first letter."""
    message = str(exc)
    for prefix in _STRIP_PREFIXES:
        message = message.replace(prefix, "")
    return message[:1].upper() + message[1:]


def suggestion_for(code: int) -> str | None:
    """One-line remediation hint for *code*, if there is one."""
    try:
        return _SUGGESTIONS.get(ErrorCode(code))
    except ValueError:
        return None


def echo_failure(message: str, code: int) -> None:
    """Write the failure line and any hint to stderr."""
    click.echo(f"❌ {message}", err=True)
    suggestion = suggestion_for(code)
    if suggestion:
        click.echo(f"💡 {suggestion}", err=True)


def handle(exc: BaseException) -> int:
    """Report *exc* on stderr and return its code for use as an exit status."""
    code = classify(exc)
    echo_failure(format_message(exc), code)
    return int(code)


def create_error_result(exc: BaseException) -> ComponentResult:
    """Classify *exc* into a failed ComponentResult without writing output."""
    return ComponentResult.failure(format_message(exc), int(classify(exc)))
