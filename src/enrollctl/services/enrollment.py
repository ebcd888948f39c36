"""EnrollmentService — the boundary between raw requests and valid students.

Pipeline: PARSE → SAVE → EVENT → RESPOND
(Any PARSE failure short-circuits straight to RESPOND.)

This is the only place where a raw :class:`StudentRequest` and a
:class:`ValidStudent` are in scope together. Everything downstream of
``SAVE`` receives the validated aggregate only.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from enrollctl.domain.result import Failure
from enrollctl.domain.scalars import NAME_PATTERN, compile_name_pattern
from enrollctl.domain.student import (
    AUTO_ENROLL_AGE,
    AUTO_ENROLL_COURSES,
    StudentRequest,
    ValidStudent,
    parse_student,
)
from enrollctl.services.base import BaseService
from enrollctl.services.result import ServiceResult

if TYPE_CHECKING:
    from enrollctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class StudentSink(Protocol):
    """Downstream save collaborator. Accepts only validated students."""

    def save_student(self, student: ValidStudent) -> None: ...


class InMemoryRoster:
    """Default sink: keeps saved students in arrival order."""

    def __init__(self) -> None:
        self._students: list[ValidStudent] = []

    def save_student(self, student: ValidStudent) -> None:
        self._students.append(student)

    @property
    def students(self) -> tuple[ValidStudent, ...]:
        return tuple(self._students)

    def __len__(self) -> int:
        return len(self._students)


class EnrollmentService(BaseService):
    """Parses enrolment requests and hands valid students to the sink.

    Raises:
        ValueError: *name_pattern* is not a valid regular expression.
    """

    def __init__(
        self,
        sink: StudentSink | None = None,
        *,
        plugins: PluginManager | None = None,
        name_pattern: str | re.Pattern[str] = NAME_PATTERN,
        auto_enroll_age: int = AUTO_ENROLL_AGE,
        auto_enroll_courses: Iterable[str] = AUTO_ENROLL_COURSES,
    ) -> None:
        super().__init__(plugins=plugins)
        self._sink: StudentSink = sink if sink is not None else InMemoryRoster()
        self._name_pattern = compile_name_pattern(name_pattern)
        self._auto_age = auto_enroll_age
        self._auto_courses = frozenset(auto_enroll_courses)

    @property
    def sink(self) -> StudentSink:
        return self._sink

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_student(self, request: StudentRequest) -> ServiceResult:
        """Parse *request*; save and announce the student if it is valid."""
        return self._enroll(request, op="add_student")

    def auto_enroll(self, name: str) -> ServiceResult:
        """Enrol a child by name with the default age and base courses."""
        request = StudentRequest(name=name, age=self._auto_age, courses=self._auto_courses)
        return self._enroll(request, op="auto_enroll")

    # ------------------------------------------------------------------
    # Pipeline (private)
    # ------------------------------------------------------------------

    def _enroll(self, request: StudentRequest, *, op: str) -> ServiceResult:
        warnings: list[str] = []

        # ── PARSE ─────────────────────────────────────────────────
        parsed = parse_student(request, name_pattern=self._name_pattern)
        if isinstance(parsed, Failure):
            violation = parsed.violation
            logger.info(
                "Rejected enrolment: %s (%s on %s)",
                violation.message,
                violation.kind.value,
                violation.field,
            )
            return ServiceResult.from_violation(op, violation)
        student = parsed.value

        # ── SAVE ──────────────────────────────────────────────────
        self._sink.save_student(student)
        payload = student.to_payload()
        logger.info("Enrolled student %s", payload["name"])

        # ── EVENT ─────────────────────────────────────────────────
        self._dispatch_event("post_enroll", {"student": payload}, warnings)

        # ── RESPOND ───────────────────────────────────────────────
        return ServiceResult(ok=True, op=op, data=payload, warnings=warnings)
