"""The result envelope every service operation returns.

INVARIANT: Services answer with a ServiceResult, success or not.
Validation failures become ``ok=False`` results; they never propagate
as exceptions past a service.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from enrollctl.domain.result import Violation, ViolationKind

VIOLATION_CODES: dict[ViolationKind, str] = {
    ViolationKind.FORMAT: "FORMAT_VIOLATION",
    ViolationKind.RANGE: "RANGE_VIOLATION",
    ViolationKind.MEMBERSHIP: "MEMBERSHIP_VIOLATION",
    ViolationKind.CARDINALITY: "CARDINALITY_VIOLATION",
    ViolationKind.MALFORMED: "MALFORMED_INPUT",
}


class ServiceError(BaseModel):
    """Why an operation was refused: a stable code plus the violation message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: False when the input was rejected.
        op: Operation name, e.g. ``"add_student"``; selects the renderer.
        data: Plain-data payload (the student or user view).
        warnings: Problems that did not stop the operation (plugin failures).
        error: Set exactly when ``ok`` is False.
        meta: Free-form extras for callers; unused by the CLI.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def from_violation(cls, op: str, violation: Violation) -> ServiceResult:
        """Build the failure result for a rejected input."""
        detail: dict[str, Any] = {"kind": violation.kind.value}
        if violation.field is not None:
            detail["field"] = violation.field
        return cls(
            ok=False,
            op=op,
            error=ServiceError(
                code=VIOLATION_CODES[violation.kind],
                message=violation.message,
                detail=detail,
            ),
        )
