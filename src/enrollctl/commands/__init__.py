"""Subcommand modules for enrollctl.

Provides register_commands() which uses deferred imports to keep
``enrollctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``user`` group and the standalone commands on the root group."""
    from enrollctl.commands.enroll import auto_enroll, enroll
    from enrollctl.commands.user import user

    cli.add_command(enroll)
    cli.add_command(auto_enroll)
    cli.add_command(user)
