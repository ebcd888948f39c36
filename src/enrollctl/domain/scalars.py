"""Validated scalar types — one invariant each, enforced at construction.

Every type is a frozen, strict pydantic model whose own validator checks
the invariant, so no construction path can produce an invalid instance.
The public entry point is the smart constructor (``parse`` / ``from_set``),
which returns a :data:`ParseResult` instead of raising.

INVARIANT: Once constructed, a scalar is read-only. "Changing" one means
parsing a new value.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from enrollctl.domain.base import DomainModel
from enrollctl.domain.result import Failure, ParseResult, Success, violation_from_error

NAME_PATTERN = r"^[A-Z][a-z]+(?:[ '-][A-Z]?[a-z]+)*$"
MIN_SCHOOL_AGE = 6
VALID_COURSES: frozenset[str] = frozenset({"Maths", "Physics", "Art", "Music"})

T = TypeVar("T")


def compile_name_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a name pattern, reporting a malformed one as ``ValueError``."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        msg = f"name pattern {pattern!r} is not a valid regular expression: {exc}"
        raise ValueError(msg) from exc


class _Validated(DomainModel):
    """Shared config and smart-constructor plumbing for validated values."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    field_name: ClassVar[str | None] = None

    @classmethod
    def _construct(
        cls,
        raw: Any,
        data: dict[str, Any],
        context: dict[str, Any] | None = None,
    ) -> ParseResult[Self]:
        try:
            return Success(cls.model_validate(data, context=context))
        except ValidationError as exc:
            return Failure(violation_from_error(exc, field=cls.field_name, value=raw))


class Name(_Validated):
    """A student name matching the name pattern."""

    field_name: ClassVar[str | None] = "name"

    value: str

    @field_validator("value")
    @classmethod
    def _matches_pattern(cls, value: str, info: ValidationInfo) -> str:
        pattern = (info.context or {}).get("pattern", NAME_PATTERN)
        if re.fullmatch(pattern, value) is None:
            raise PydanticCustomError(
                "format_violation",
                "Name: {value} is not a valid name",
                {"value": value},
            )
        return value

    @classmethod
    def parse(cls, raw: Any, *, pattern: str | re.Pattern[str] = NAME_PATTERN) -> ParseResult[Name]:
        """Validate *raw* against *pattern* (a full match is required).

        Copies made with ``model_copy`` are checked against ``NAME_PATTERN``.

        Raises:
            ValueError: *pattern* is not a valid regular expression.
        """
        compiled = compile_name_pattern(pattern)
        return cls._construct(raw, {"value": raw}, context={"pattern": compiled})

    def unwrap(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Age(_Validated):
    """An age old enough for school (``>= MIN_SCHOOL_AGE``)."""

    field_name: ClassVar[str | None] = "age"

    value: int

    @field_validator("value")
    @classmethod
    def _old_enough(cls, value: int) -> int:
        if value < MIN_SCHOOL_AGE:
            raise PydanticCustomError(
                "range_violation",
                "Not ready for school at age: {value} (minimum age is {minimum})",
                {"value": value, "minimum": MIN_SCHOOL_AGE},
            )
        return value

    @classmethod
    def parse(cls, raw: Any) -> ParseResult[Age]:
        return cls._construct(raw, {"value": raw})

    def unwrap(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Course(_Validated):
    """One of the courses in ``VALID_COURSES``."""

    field_name: ClassVar[str | None] = "courses"

    value: str

    @field_validator("value")
    @classmethod
    def _is_offered(cls, value: str) -> str:
        if value not in VALID_COURSES:
            raise PydanticCustomError(
                "membership_violation",
                "Not a valid course: {value}",
                {"value": value},
            )
        return value

    @classmethod
    def parse(cls, raw: Any) -> ParseResult[Course]:
        return cls._construct(raw, {"value": raw})

    def unwrap(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class NonEmptySet(_Validated, Generic[T]):
    """An immutable set with at least one element.

    Element validity is the element type's concern; this type only
    guarantees cardinality. Parametrize with the element type
    (``NonEmptySet[Course]``) to have elements checked as instances of it.
    """

    elements: frozenset[T]

    @field_validator("elements")
    @classmethod
    def _not_empty(cls, elements: frozenset[T]) -> frozenset[T]:
        if not elements:
            raise PydanticCustomError(
                "cardinality_violation",
                "Set must contain at least one element",
            )
        return elements

    @classmethod
    def from_set(cls, items: Iterable[T]) -> ParseResult[Self]:
        """Wrap an existing collection, failing when it is empty."""
        elements = frozenset(items)
        return cls._construct(elements, {"elements": elements})

    def unwrap(self) -> frozenset[T]:
        return self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __contains__(self, item: object) -> bool:
        return item in self.elements

    def __str__(self) -> str:
        return "{" + ", ".join(sorted(str(e) for e in self.elements)) + "}"
