"""EnrollSettings — everything a command needs to know, in one frozen object.

Sources, highest priority first:

1. CLI flags (passed as init kwargs)
2. ``ENROLLCTL_*`` environment variables; ``__`` reaches into sections,
   e.g. ``ENROLLCTL_ENROLLMENT__AUTO_ENROLL_AGE=8``
3. ``enrollctl.toml`` (see :mod:`enrollctl.config.discovery`)
4. Defaults from :mod:`enrollctl.config.models`
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from enrollctl.config.discovery import find_config, read_toml
from enrollctl.config.models import EnrollmentConfig, UsersConfig

# Which TOML file the settings under construction should read.
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


class TomlFileSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML document."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_toml(path) if path is not None else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class EnrollSettings(BaseSettings):
    """Merged CLI, environment, and file settings.

    Attributes:
        config_path: The TOML file that was read, or None.
        no_plugins: Skip entry-point plugin discovery.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="ENROLLCTL_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_plugins: bool = False

    enrollment: EnrollmentConfig = Field(default_factory=EnrollmentConfig)
    users: UsersConfig = Field(default_factory=UsersConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlFileSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> EnrollSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* must exist; otherwise the config is
        discovered from *start_dir* (default: cwd).
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(start_dir)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)
