"""Command group: inspect a user record and run role-specific actions."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from enrollctl.commands._base import EnrollGroup

if TYPE_CHECKING:
    from enrollctl.commands._context import AppContext


@click.group(
    cls=EnrollGroup,
    examples="""\
  enrollctl user describe admin.json
  enrollctl --json user act admin.json
  cat user.json | enrollctl user act -""",
)
def user() -> None:
    """Work with user records (JSON objects tagged by "role")."""


@user.command(
    examples="""\
  enrollctl user describe admin.json""",
)
@click.argument("user_file", type=click.File("r"))
@click.pass_obj
def describe(app: AppContext, user_file: IO[str]) -> None:
    """Show who a user is and which role they hold."""
    raw = app.read_json_object(user_file)
    app.emit(app.user_service().describe_user(raw))


@user.command(
    examples="""\
  enrollctl user act admin.json
  enrollctl --json user act -""",
)
@click.argument("user_file", type=click.File("r"))
@click.pass_obj
def act(app: AppContext, user_file: IO[str]) -> None:
    """Perform the privileged action if the user is allowed to.

    Users without the required privilege get "no action", not an error.
    """
    raw = app.read_json_object(user_file)
    app.emit(app.user_service().privileged_action(raw))
