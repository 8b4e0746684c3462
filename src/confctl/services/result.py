"""ServiceResult and ServiceError, the return type of every service call.

Commands render a result; they never see store exceptions. A result is
either ok with a payload, or failed with exactly one :class:`ServiceError`
whose code is one of :data:`ErrorCode`.
"""

from __future__ import annotations

from typing import Any, Literal, Self, TypeAlias

from pydantic import BaseModel, Field, model_validator

ErrorCode: TypeAlias = Literal["INVALID_INPUT", "CONFLICT", "NOT_FOUND", "STORAGE_UNAVAILABLE"]


class ServiceError(BaseModel):
    """Why an operation failed.

    ``message`` is shown to the caller as-is, so storage failures carry a
    generic message and keep their cause in the log only.
    """

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, e.g. ``"create_item"`` or ``"insfile"``.
        data: Operation payload; empty on failure.
        warnings: Non-fatal findings, such as dependency cycles.
        error: Set if and only if ``ok`` is False.
        meta: Telemetry and other out-of-band data.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> Self:
        if self.ok and self.error is not None:
            msg = f"{self.op}: a successful result cannot carry an error"
            raise ValueError(msg)
        if not self.ok and self.error is None:
            msg = f"{self.op}: a failed result needs an error"
            raise ValueError(msg)
        return self

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result; keyword arguments become ``error.detail``."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
