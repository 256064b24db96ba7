"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any future interface (e.g. an HTTP adapter) consume this
type; ``error.detail["status"]`` carries the HTTP-equivalent status.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error code → HTTP-equivalent status for outer adapters.
ERROR_STATUS: dict[str, int] = {
    "NOT_FOUND": 404,
    "INVALID_REFERENCE": 422,
    "INVALID_BINARY_CONTENT": 422,
    "VALIDATION_FAILED": 422,
    "PERSISTENCE_FAILURE": 500,
}


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_product"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result, stamping the HTTP-equivalent status."""
        status = ERROR_STATUS.get(code)
        if status is not None:
            detail.setdefault("status", status)
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
