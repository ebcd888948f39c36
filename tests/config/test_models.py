"""Tests for config models — defaults and validation."""

import pytest
from pydantic import ValidationError

from enrollctl.config.models import EnrollConfig, EnrollmentConfig, UsersConfig
from enrollctl.domain.scalars import NAME_PATTERN


class TestDefaults:
    def test_enrollment_defaults(self) -> None:
        cfg = EnrollmentConfig()
        assert cfg.name_pattern == NAME_PATTERN
        assert cfg.auto_enroll_age == 7
        assert cfg.auto_enroll_courses == ("Maths", "Music")

    def test_users_defaults(self) -> None:
        assert UsersConfig().required_privilege == "Special"

    def test_top_level_sections(self) -> None:
        cfg = EnrollConfig()
        assert cfg.enrollment == EnrollmentConfig()
        assert cfg.users == UsersConfig()


class TestValidation:
    def test_invalid_regex_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not a valid regular expression"):
            EnrollmentConfig(name_pattern="[A-Z")

    def test_sparse_section(self) -> None:
        cfg = EnrollConfig.model_validate({"enrollment": {"auto_enroll_courses": ["Art"]}})
        assert cfg.enrollment.auto_enroll_courses == ("Art",)
        assert cfg.enrollment.auto_enroll_age == 7

    def test_frozen(self) -> None:
        cfg = UsersConfig()
        with pytest.raises(ValidationError):
            cfg.required_privilege = "Other"  # type: ignore[misc]


class TestLayering:
    def test_enrollment_defaults_come_from_the_domain(self) -> None:
        from enrollctl.domain.student import AUTO_ENROLL_AGE, AUTO_ENROLL_COURSES

        cfg = EnrollmentConfig()
        assert cfg.auto_enroll_age == AUTO_ENROLL_AGE
        assert set(cfg.auto_enroll_courses) == AUTO_ENROLL_COURSES

    def test_config_does_not_import_services(self) -> None:
        import inspect

        import enrollctl.config.models as models

        assert "enrollctl.services" not in inspect.getsource(models)
