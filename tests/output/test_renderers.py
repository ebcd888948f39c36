"""Tests for the per-operation Rich renderers."""

from enrollctl.output.renderers import render_quiet, render_result
from enrollctl.services.result import ServiceError, ServiceResult


class TestStudentRenderer:
    def test_auto_enroll(self) -> None:
        result = ServiceResult(
            ok=True,
            op="auto_enroll",
            data={"name": "Bobby", "age": 7, "courses": ["Maths", "Music"]},
        )
        output = render_result(result)
        assert "auto_enroll" in output
        assert "name: Bobby" in output
        assert "age: 7" in output
        assert "courses: Maths, Music" in output


class TestUserRenderers:
    def test_describe_user(self) -> None:
        result = ServiceResult(
            ok=True,
            op="describe_user",
            data={
                "username": "carol",
                "role": "customer_admin",
                "description": "carol (admin of customer 42, 2 privilege(s))",
            },
        )
        output = render_result(result)
        assert "username: carol" in output
        assert "role: customer_admin" in output
        assert "admin of customer" in output

    def test_privileged_action_performed(self) -> None:
        result = ServiceResult(
            ok=True,
            op="privileged_action",
            data={
                "performed": True,
                "username": "root",
                "role": "system_admin",
                "privilege": "Special",
                "secret": "**********",
            },
        )
        output = render_result(result)
        assert "performed with privilege Special" in output
        assert "secret: **********" in output

    def test_privileged_action_none(self) -> None:
        result = ServiceResult(
            ok=True,
            op="privileged_action",
            data={"performed": False, "username": "alice", "role": "basic"},
        )
        output = render_result(result)
        assert "action: none" in output
        assert "secret" not in output


class TestErrorRenderer:
    RESULT = ServiceResult(
        ok=False,
        op="add_student",
        error=ServiceError(
            code="MEMBERSHIP_VIOLATION",
            message="Not a valid course: Chemistry",
            detail={"kind": "membership", "field": "courses"},
        ),
    )

    def test_message(self) -> None:
        output = render_result(self.RESULT)
        assert "ERROR" in output
        assert "Not a valid course: Chemistry" in output
        assert "MEMBERSHIP_VIOLATION" not in output

    def test_verbose_shows_code_and_detail(self) -> None:
        output = render_result(self.RESULT, verbose=True)
        assert "code: MEMBERSHIP_VIOLATION" in output
        assert "field: courses" in output

    def test_quiet(self) -> None:
        assert render_quiet(self.RESULT) == "ERROR: add_student — Not a valid course: Chemistry"


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        result = ServiceResult(ok=True, op="something_else", data={"count": 3})
        output = render_result(result)
        assert "something_else" in output
        assert "count: 3" in output
