"""ParseResult — success or a structured violation, never an exception.

Smart constructors return ``Success(value)`` or ``Failure(violation)``.
Callers branch on which case they received::

    match Age.parse(raw):
        case Success(value=age):
            ...
        case Failure(violation=violation):
            ...

INVARIANT: Validation failure is a value. Nothing past a smart constructor
raises for invalid input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import ValidationError


class ViolationKind(StrEnum):
    """Which invariant a raw input broke."""

    FORMAT = "format"
    RANGE = "range"
    MEMBERSHIP = "membership"
    CARDINALITY = "cardinality"
    MALFORMED = "malformed"


# Custom pydantic error types raised by domain validators.
ERROR_TYPE_KINDS: dict[str, ViolationKind] = {
    "format_violation": ViolationKind.FORMAT,
    "range_violation": ViolationKind.RANGE,
    "membership_violation": ViolationKind.MEMBERSHIP,
    "cardinality_violation": ViolationKind.CARDINALITY,
}


@dataclass(frozen=True, slots=True)
class Violation:
    """A single broken invariant, with the constituent that broke it."""

    kind: ViolationKind
    message: str
    field: str | None = None
    value: Any = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Success[T]:
    """A validated value."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """A rejected input, carrying the first violation found."""

    violation: Violation

    @property
    def reason(self) -> str:
        return self.violation.message


type ParseResult[T] = Success[T] | Failure


def violation_from_error(
    exc: ValidationError,
    *,
    field: str | None = None,
    value: Any = None,
) -> Violation:
    """Convert the first error of a pydantic ``ValidationError`` into a Violation.

    Domain validators raise ``PydanticCustomError`` with one of the
    ``ERROR_TYPE_KINDS`` types; any other error (wrong primitive type,
    missing key, unknown discriminator) is reported as ``MALFORMED``.
    """
    errors = exc.errors(include_url=False)
    first = errors[0]
    kind = ERROR_TYPE_KINDS.get(first["type"], ViolationKind.MALFORMED)
    message = first["msg"]
    if kind is ViolationKind.MALFORMED:
        where = field or ".".join(str(part) for part in first["loc"])
        if where:
            message = f"{where}: {message}"
    return Violation(
        kind=kind,
        message=message,
        field=field,
        value=value if value is not None else first.get("input"),
    )
