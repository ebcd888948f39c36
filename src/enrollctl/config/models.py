"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, enrollctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from enrollctl.domain.dispatch import SPECIAL_PRIVILEGE
from enrollctl.domain.scalars import NAME_PATTERN, compile_name_pattern
from enrollctl.domain.student import AUTO_ENROLL_AGE, AUTO_ENROLL_COURSES


class EnrollmentConfig(BaseModel):
    """[enrollment] section."""

    model_config = {"frozen": True}

    name_pattern: str = NAME_PATTERN
    auto_enroll_age: int = AUTO_ENROLL_AGE
    auto_enroll_courses: tuple[str, ...] = Field(
        default_factory=lambda: tuple(sorted(AUTO_ENROLL_COURSES))
    )

    @field_validator("name_pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        compile_name_pattern(value)
        return value


class UsersConfig(BaseModel):
    """[users] section."""

    model_config = {"frozen": True}

    required_privilege: str = SPECIAL_PRIVILEGE


class EnrollConfig(BaseModel):
    """Top-level enrollctl.toml model."""

    model_config = {"frozen": True}

    enrollment: EnrollmentConfig = Field(default_factory=EnrollmentConfig)
    users: UsersConfig = Field(default_factory=UsersConfig)
