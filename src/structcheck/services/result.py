"""ServiceResult and ServiceError — what every service method returns.

The CLI renders a ServiceResult for humans or as JSON and turns
``ok=False`` into exit code 1. An invalid document is an expected
outcome, so it is reported through ``error`` rather than raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation did not succeed.

    ``code`` is a stable identifier such as ``SCHEMA_NOT_FOUND`` or
    ``INVALID_DOCUMENT``; ``detail`` carries machine-readable context.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"check"``, ``"describe"``).
        data: Operation-specific payload. Present on failure too when the
            operation got far enough to produce one.
        warnings: Non-fatal issues, e.g. a plugin hook that raised.
        error: Set when ``ok`` is False.
        meta: Optional metadata (timing, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any] | None = None,
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {}, warnings=warnings or [], meta=meta)

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail or {}),
            meta=meta,
        )
