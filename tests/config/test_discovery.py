"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from enrollctl.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, load_config
from enrollctl.config.models import EnrollConfig


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[enrollment]\nauto_enroll_age = 8\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[enrollment]\nauto_enroll_age = 8\n")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[users]\nrequired_privilege = "Launch"\n')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_pointing_nowhere(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            '[enrollment]\nauto_enroll_age = 8\n[users]\nrequired_privilege = "Launch"\n'
        )
        cfg = load_config(config_file)
        assert cfg.enrollment.auto_enroll_age == 8
        assert cfg.users.required_privilege == "Launch"
        assert cfg.enrollment.auto_enroll_courses == ("Maths", "Music")  # default

    def test_returns_defaults_when_no_file(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == EnrollConfig()

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert load_config(config_file) == EnrollConfig()
