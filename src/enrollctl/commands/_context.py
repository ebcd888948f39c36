"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds services from settings and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import click

from enrollctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from enrollctl.config.settings import EnrollSettings
    from enrollctl.plugins.manager import PluginManager
    from enrollctl.services.enrollment import EnrollmentService
    from enrollctl.services.result import ServiceResult
    from enrollctl.services.users import UserService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Services are built lazily so ``--help`` and ``--version`` never load
    plugins.
    """

    def __init__(self, settings: EnrollSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from enrollctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager, created on first access.

        Entry-point plugins are loaded unless ``--no-plugins`` was given.
        """
        if self._plugins is None:
            from enrollctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if not self.settings.no_plugins:
                self._plugins.discover_and_load()
        return self._plugins

    def enrollment_service(self) -> EnrollmentService:
        from enrollctl.services.enrollment import EnrollmentService

        cfg = self.settings.enrollment
        return EnrollmentService(
            plugins=self.plugins,
            name_pattern=cfg.name_pattern,
            auto_enroll_age=cfg.auto_enroll_age,
            auto_enroll_courses=cfg.auto_enroll_courses,
        )

    def user_service(self) -> UserService:
        from enrollctl.services.users import UserService

        return UserService(
            plugins=self.plugins,
            required_privilege=self.settings.users.required_privilege,
        )

    @staticmethod
    def read_json_object(stream: IO[str]) -> dict[str, Any]:
        """Decode a JSON object from *stream*, failing the command on bad input."""
        try:
            data = json.load(stream)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise click.BadParameter("expected a JSON object")
        return data

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
