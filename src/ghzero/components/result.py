"""ComponentResult and ComponentError — the universal component contract.

INVARIANT: Every ``Component.execute`` call returns a ComponentResult.
Exactly one of ``data`` (success) or ``error`` (failure) is meaningful,
and ``timestamp`` is always set when the result is created.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

UNKNOWN_ERROR_MESSAGE = "Unknown error"
UNKNOWN_ERROR_CODE = 1


class ComponentError(BaseModel):
    """Failure payload within a ComponentResult."""

    model_config = {"frozen": True}

    message: str
    code: int = UNKNOWN_ERROR_CODE


class ComponentResult(BaseModel):
    """Tagged success/failure envelope.

    Attributes:
        ok: Whether the operation succeeded.
        data: Normalized output on success (a list of records or a record).
        metadata: Component name/description/version/category on success.
        error: Message and numeric code on failure.
        timestamp: UTC capture time.
    """

    model_config = {"frozen": True}

    ok: bool
    data: Any = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    error: ComponentError | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def _one_variant(self) -> ComponentResult:
        if self.ok and self.error is not None:
            raise ValueError("successful result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("failed result requires an error")
        return self

    @classmethod
    def success(cls, data: Any, metadata: dict[str, Any] | None = None) -> ComponentResult:
        """Wrap component output."""
        return cls(ok=True, data=data, metadata=metadata or {})

    @classmethod
    def failure(cls, message: str, code: int = UNKNOWN_ERROR_CODE) -> ComponentResult:
        """Wrap a failure."""
        return cls(ok=False, error=ComponentError(message=message, code=code))

    def is_success(self) -> bool:
        return self.ok

    def get_data(self) -> Any:
        """Return the payload, or an empty dict when there is none."""
        return self.data if self.data is not None else {}

    def get_error(self) -> str:
        return self.error.message if self.error else UNKNOWN_ERROR_MESSAGE

    def get_error_code(self) -> int:
        return self.error.code if self.error else UNKNOWN_ERROR_CODE
