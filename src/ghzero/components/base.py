"""Component — validated execution of one GitHub capability.

Each component declares static metadata and a :class:`ParamSchema`.
:meth:`Component.execute` validates parameters, checks for a token, runs
the component operation, and always returns a :class:`ComponentResult`.

Validation is shallow: presence, primitive type, enum, numeric range.
Values are never coerced, so ``"5"`` does not satisfy an integer field.
A parameter whose value is ``None`` is treated as absent, and absent
parameters take the schema default before the operation runs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel

from ghzero.components.errors import (
    TokenMissingError,
    ValidationFailedError,
    create_error_result,
)
from ghzero.components.result import ComponentResult
from ghzero.config.models import GitHubConfig
from ghzero.infrastructure.github import GitHubClient, GitHubGateway

logger = logging.getLogger(__name__)


class FieldType(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    ARRAY = "array"
    BOOLEAN = "boolean"


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


_TYPE_CHECKS: dict[FieldType, Callable[[Any], bool]] = {
    FieldType.STRING: _is_string,
    FieldType.INTEGER: _is_integer,
    FieldType.ARRAY: _is_array,
    FieldType.BOOLEAN: _is_boolean,
}


@dataclass(frozen=True)
class FieldSpec:
    """Declared constraints for a single parameter."""

    type: FieldType
    description: str = ""
    enum: tuple[Any, ...] | None = None
    minimum: int | None = None
    maximum: int | None = None
    default: Any = None

    def check(self, name: str, value: Any) -> str | None:
        """Return an error message for *value*, or None if it is acceptable."""
        if not _TYPE_CHECKS[self.type](value):
            return f"{name} must be of type {self.type}"
        if self.enum is not None and value not in self.enum:
            allowed = ", ".join(str(choice) for choice in self.enum)
            return f"{name} must be one of: {allowed}"
        if self.minimum is not None and _is_integer(value) and value < self.minimum:
            return f"{name} must be >= {self.minimum}"
        if self.maximum is not None and _is_integer(value) and value > self.maximum:
            return f"{name} must be <= {self.maximum}"
        return None


@dataclass(frozen=True)
class ParamSchema:
    """Per-component parameter declaration."""

    properties: dict[str, FieldSpec] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def errors(self, params: Mapping[str, Any]) -> list[str]:
        problems = [f"{name} is required" for name in self.required if params.get(name) is None]
        for name, spec in self.properties.items():
            value = params.get(name)
            if value is None:
                continue
            problem = spec.check(name, value)
            if problem:
                problems.append(problem)
        return problems

    def apply_defaults(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Declared defaults overlaid with every non-``None`` value in *params*."""
        merged = {
            name: spec.default
            for name, spec in self.properties.items()
            if spec.default is not None
        }
        merged.update({key: value for key, value in params.items() if value is not None})
        return merged


class ComponentMetadata(BaseModel):
    """Static description attached to every successful result."""

    model_config = {"frozen": True}

    name: str
    description: str
    version: str = "1.0.0"
    category: str


FORMAT_FIELD = FieldSpec(
    type=FieldType.STRING,
    enum=("json", "array", "text"),
    default="array",
    description="Output format",
)


class Component(ABC):
    """Abstract base for repos, issues and clone components.

    Subclasses set :attr:`metadata` and :attr:`schema` and implement
    :meth:`execute_component`.

    Usage::

        result = ReposComponent(token, client=gateway).execute({"limit": 5})
        if result.is_success():
            records = result.get_data()
    """

    metadata: ClassVar[ComponentMetadata]
    schema: ClassVar[ParamSchema]

    def __init__(
        self,
        token: str | None,
        client: GitHubGateway | None = None,
        *,
        github_config: GitHubConfig | None = None,
    ) -> None:
        self._token = token
        self._client = client
        self._github_config = github_config

    @property
    def client(self) -> GitHubGateway:
        """The GitHub gateway (built from the token on first access)."""
        if self._client is None:
            if not self._token:
                raise TokenMissingError()
            self._client = GitHubClient(self._token, self._github_config)
        return self._client

    def validation_errors(self, params: Mapping[str, Any]) -> list[str]:
        return self.schema.errors(params)

    def validate(self, params: Mapping[str, Any]) -> bool:
        return not self.validation_errors(params)

    def execute(self, params: Mapping[str, Any] | None = None) -> ComponentResult:
        """Validate *params*, run the operation, and wrap the outcome."""
        params = dict(params or {})
        problems = self.validation_errors(params)
        if problems:
            logger.debug("%s rejected parameters: %s", self.metadata.name, problems)
            return create_error_result(
                ValidationFailedError("Validation failed: " + "; ".join(problems))
            )
        params = self.schema.apply_defaults(params)

        try:
            if not self._token:
                raise TokenMissingError()
            data = self.execute_component(params)
        except Exception as exc:
            logger.debug("%s failed", self.metadata.name, exc_info=True)
            return create_error_result(exc)

        return ComponentResult.success(data, self.metadata.model_dump())

    @abstractmethod
    def execute_component(self, params: dict[str, Any]) -> Any:
        """Run the component-specific operation and return plain data."""
        ...

