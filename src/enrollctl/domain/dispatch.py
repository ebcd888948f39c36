"""Exhaustive dispatch over the user variants.

Two equivalent seams for role-specific behaviour:

- ``match`` statements ending in :func:`typing.assert_never`, so a type
  checker flags every site when a variant is added.
- :class:`UserHandler`, an ABC with one abstract method per variant; a
  handler that forgets a variant cannot be instantiated.

The privileged secret is only reachable inside the ``SystemAdmin`` branch,
so no "this should never happen" role check is needed downstream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import assert_never

from pydantic import SecretStr

from enrollctl.domain.users import BasicUser, CustomerAdmin, SystemAdmin, User

SPECIAL_PRIVILEGE = "Special"


class UserHandler[R](ABC):
    """Role-specific behaviour, one method per variant."""

    @abstractmethod
    def on_basic_user(self, user: BasicUser) -> R: ...

    @abstractmethod
    def on_customer_admin(self, user: CustomerAdmin) -> R: ...

    @abstractmethod
    def on_system_admin(self, user: SystemAdmin) -> R: ...


def dispatch[R](user: User, handler: UserHandler[R]) -> R:
    """Route *user* to the handler method for its variant."""
    match user:
        case BasicUser():
            return handler.on_basic_user(user)
        case CustomerAdmin():
            return handler.on_customer_admin(user)
        case SystemAdmin():
            return handler.on_system_admin(user)
        case _:
            assert_never(user)


def display_name(user: User) -> str:
    """Every variant has a username; no dispatch needed."""
    return user.username


def describe(user: User) -> str:
    match user:
        case BasicUser(customer_id=customer_id):
            return f"{user.username} (user of customer {customer_id})"
        case CustomerAdmin(customer_id=customer_id, admin_privileges=privileges):
            return (
                f"{user.username} (admin of customer {customer_id}, "
                f"{len(privileges)} privilege(s))"
            )
        case SystemAdmin(admin_privileges=privileges):
            return f"{user.username} (system admin, {len(privileges)} privilege(s))"
        case _:
            assert_never(user)


@dataclass(frozen=True)
class PrivilegedAction:
    """Receipt of a performed privileged action."""

    performed_by: str
    privilege: str
    secret: SecretStr


class PrivilegedActionHandler(UserHandler[PrivilegedAction | None]):
    """Acts only for a system admin holding *required_privilege*.

    A missing privilege, or any other variant, yields ``None``: the action
    is optional, not a validation failure.
    """

    def __init__(self, required_privilege: str = SPECIAL_PRIVILEGE) -> None:
        self._required = required_privilege

    def on_basic_user(self, user: BasicUser) -> None:
        return None

    def on_customer_admin(self, user: CustomerAdmin) -> None:
        return None

    def on_system_admin(self, user: SystemAdmin) -> PrivilegedAction | None:
        if self._required not in user.admin_privileges:
            return None
        return self._act(user)

    def _act(self, admin: SystemAdmin) -> PrivilegedAction:
        return PrivilegedAction(
            performed_by=admin.username,
            privilege=self._required,
            secret=admin.nuclear_secret,
        )


def perform_privileged_action(
    user: User,
    *,
    required_privilege: str = SPECIAL_PRIVILEGE,
) -> PrivilegedAction | None:
    """Run the privileged action if *user* may; ``None`` means no action."""
    return dispatch(user, PrivilegedActionHandler(required_privilege))
