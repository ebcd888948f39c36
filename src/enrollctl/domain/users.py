"""Role variants — one closed set of user shapes instead of one flat record.

Each variant declares only the fields meaningful for its role:

- ``BasicUser``: belongs to a customer.
- ``CustomerAdmin``: belongs to a customer and holds admin privileges.
- ``SystemAdmin``: holds admin privileges and the privileged secret.

INVARIANT: A field owned by one variant cannot exist on another.
``extra="forbid"`` rejects foreign fields at construction and ``frozen``
rejects them afterwards (``model_copy`` re-validates); there is no optional "only for role X" field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal
from uuid import UUID

from pydantic import ConfigDict, Field, SecretStr, TypeAdapter, ValidationError

from enrollctl.domain.base import DomainModel
from enrollctl.domain.result import Failure, ParseResult, Success, violation_from_error


class _UserFields(DomainModel):
    """Fields shared by every variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID
    email: str
    username: str


class BasicUser(_UserFields):
    """A regular user of a customer account."""

    role: Literal["basic"] = "basic"
    customer_id: UUID


class CustomerAdmin(_UserFields):
    """An administrator scoped to one customer account."""

    role: Literal["customer_admin"] = "customer_admin"
    admin_privileges: tuple[str, ...]
    customer_id: UUID


class SystemAdmin(_UserFields):
    """A system-wide administrator; the only holder of the privileged secret."""

    role: Literal["system_admin"] = "system_admin"
    admin_privileges: tuple[str, ...]
    nuclear_secret: SecretStr


type User = BasicUser | CustomerAdmin | SystemAdmin

USER_ROLES: tuple[str, ...] = ("basic", "customer_admin", "system_admin")

_user_adapter: TypeAdapter[BasicUser | CustomerAdmin | SystemAdmin] = TypeAdapter(
    Annotated[BasicUser | CustomerAdmin | SystemAdmin, Field(discriminator="role")]
)


def parse_user(raw: Mapping[str, Any]) -> ParseResult[User]:
    """Parse a raw user record into its variant, selected by the ``role`` tag.

    Unknown roles, missing fields, and fields foreign to the selected
    variant are all reported as a ``MALFORMED`` violation.
    """
    try:
        return Success(_user_adapter.validate_python(raw))
    except ValidationError as exc:
        return Failure(violation_from_error(exc))
