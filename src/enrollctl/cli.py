"""enrollctl entry point: global flags, settings, and the command tree."""

from __future__ import annotations

from typing import Any

import click

from enrollctl import __version__
from enrollctl.commands import register_commands
from enrollctl.commands._base import EnrollGroup
from enrollctl.commands._context import AppContext
from enrollctl.config.settings import EnrollSettings


@click.group(
    cls=EnrollGroup,
    invoke_without_command=True,
    examples="""\
  enrollctl auto-enroll Bobby
  enrollctl --json enroll --name Alice --age 10 --course Art
  enrollctl -c school.toml user act admin.json""",
)
@click.version_option(version=__version__, prog_name="enrollctl")
@click.option("-c", "--config", "config_path", default=None, help="Use this config file.")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print one line per result.")
@click.option("-v", "--verbose", is_flag=True, help="Show error codes and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--no-plugins", is_flag=True, help="Do not load entry-point plugins.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """enrollctl — validate student enrolments and act on user roles."""
    settings = EnrollSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
