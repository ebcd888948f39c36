"""Aggregate parser — raw enrolment request in, ValidStudent or a violation out.

Pipeline: NAME → AGE → COURSES (each) → NON-EMPTY → ASSEMBLE

INVARIANT: Fail-fast. The first failing constituent is reported and
nothing after it is evaluated; no partially valid student ever leaves
:func:`parse_student`.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ConfigDict

from enrollctl.domain.base import DomainModel
from enrollctl.domain.result import Failure, ParseResult, Success, Violation, ViolationKind
from enrollctl.domain.scalars import NAME_PATTERN, Age, Course, Name, NonEmptySet

# Defaults for enrolling a child by name only.
AUTO_ENROLL_AGE = 7
AUTO_ENROLL_COURSES: frozenset[str] = frozenset({"Music", "Maths"})


@dataclass(frozen=True)
class StudentRequest:
    """Untrusted enrolment input, exactly as received.

    Nothing here is validated or coerced; only :func:`parse_student` may
    turn it into domain data. ``courses`` is treated as an unordered
    collection of course names.
    """

    name: Any
    age: Any
    courses: Any = frozenset()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StudentRequest:
        """Build a request from a decoded JSON object.

        Missing keys are kept as ``None`` so the parser reports them.
        """
        return cls(
            name=data.get("name"),
            age=data.get("age"),
            courses=data.get("courses"),
        )


class ValidStudent(DomainModel):
    """A student whose every constituent has passed its smart constructor.

    Strict mode rejects raw strings and ints for the fields, so the only
    way to obtain one is :func:`parse_student`.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    name: Name
    age: Age
    courses: NonEmptySet[Course]

    def to_payload(self) -> dict[str, Any]:
        """Plain-data view (courses sorted) for output and plugin hooks."""
        return {
            "name": self.name.unwrap(),
            "age": self.age.unwrap(),
            "courses": sorted(course.unwrap() for course in self.courses.unwrap()),
        }


def parse_student(
    request: StudentRequest,
    *,
    name_pattern: str | re.Pattern[str] = NAME_PATTERN,
) -> ParseResult[ValidStudent]:
    """Parse *request* into a :class:`ValidStudent`, stopping at the first violation.

    Courses are checked in sorted order so that, when several are invalid,
    the reported one does not depend on set iteration order.
    """
    name_result = Name.parse(request.name, pattern=name_pattern)
    if isinstance(name_result, Failure):
        return name_result

    age_result = Age.parse(request.age)
    if isinstance(age_result, Failure):
        return age_result

    raw_courses = request.courses
    if isinstance(raw_courses, (str, bytes, Mapping)) or not isinstance(raw_courses, Iterable):
        return Failure(
            Violation(
                kind=ViolationKind.MALFORMED,
                message="courses: Input should be a collection of course names",
                field="courses",
                value=raw_courses,
            )
        )

    courses: set[Course] = set()
    for raw_course in sorted(raw_courses, key=str):
        course_result = Course.parse(raw_course)
        if isinstance(course_result, Failure):
            return course_result
        courses.add(course_result.value)

    enrolled = NonEmptySet[Course].from_set(courses)
    if isinstance(enrolled, Failure):
        return Failure(dataclasses.replace(enrolled.violation, field="courses"))

    return Success(
        ValidStudent(
            name=name_result.value,
            age=age_result.value,
            courses=enrolled.value,
        )
    )
