"""Click base classes that add an on-demand ``--examples`` flag.

``--help`` stays short; ``--examples`` prints the command's usage
examples and exits without running the command (or its required
arguments' validation).
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", "") or "")
    ctx.exit(0)


class _ExamplesMixin:
    """Accepts an ``examples=`` keyword and exposes it as ``--examples``."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class EnrollCommand(_ExamplesMixin, click.Command):
    """A command with ``--examples``."""


class EnrollGroup(_ExamplesMixin, click.Group):
    """A group with ``--examples``; its subcommands get it too."""

    command_class = EnrollCommand
