"""Commands: enroll a student from raw input, or auto-enroll a child by name."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from enrollctl.commands._base import EnrollCommand

if TYPE_CHECKING:
    from enrollctl.commands._context import AppContext


@click.command(
    cls=EnrollCommand,
    examples="""\
  enrollctl enroll --name Alice --age 10 --course Maths --course Art
  enrollctl --json enroll --from-json request.json
  echo '{"name": "Alice", "age": 10, "courses": ["Music"]}' | enrollctl enroll --from-json -""",
)
@click.option("--name", default=None, help="Student name.")
@click.option("--age", type=int, default=None, help="Student age in years.")
@click.option("--course", "courses", multiple=True, help="Course to enroll in (repeatable).")
@click.option(
    "--from-json",
    "json_file",
    type=click.File("r"),
    default=None,
    help="Read the request as a JSON object from FILE ('-' for stdin).",
)
@click.pass_obj
def enroll(
    app: AppContext,
    name: str | None,
    age: int | None,
    courses: tuple[str, ...],
    json_file: IO[str] | None,
) -> None:
    """Validate an enrolment request and save the student."""
    from enrollctl.domain.student import StudentRequest

    if json_file is not None:
        if name is not None or age is not None or courses:
            raise click.UsageError("--from-json cannot be combined with --name/--age/--course")
        request = StudentRequest.from_mapping(app.read_json_object(json_file))
    else:
        request = StudentRequest(name=name, age=age, courses=frozenset(courses))

    app.emit(app.enrollment_service().add_student(request))


@click.command(
    "auto-enroll",
    cls=EnrollCommand,
    examples="""\
  enrollctl auto-enroll "Mary Ann"
  enrollctl --json auto-enroll Bobby""",
)
@click.argument("name")
@click.pass_obj
def auto_enroll(app: AppContext, name: str) -> None:
    """Enroll a child with the default age and base courses."""
    app.emit(app.enrollment_service().auto_enroll(name))
