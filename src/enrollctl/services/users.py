"""UserService — raw user records in, role-specific behaviour out.

Raw records are parsed into their variant once, at this boundary; the
rest of the pipeline works on the closed variant set only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from enrollctl.domain.dispatch import SPECIAL_PRIVILEGE, describe, perform_privileged_action
from enrollctl.domain.result import Failure
from enrollctl.domain.users import parse_user
from enrollctl.services.base import BaseService
from enrollctl.services.result import ServiceResult

if TYPE_CHECKING:
    from enrollctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Describes users and performs the privileged action on their behalf."""

    def __init__(
        self,
        *,
        plugins: PluginManager | None = None,
        required_privilege: str = SPECIAL_PRIVILEGE,
    ) -> None:
        super().__init__(plugins=plugins)
        self._required_privilege = required_privilege

    def describe_user(self, raw: Mapping[str, Any]) -> ServiceResult:
        op = "describe_user"
        parsed = parse_user(raw)
        if isinstance(parsed, Failure):
            return ServiceResult.from_violation(op, parsed.violation)
        user = parsed.value
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": str(user.id),
                "username": user.username,
                "email": user.email,
                "role": user.role,
                "description": describe(user),
            },
        )

    def privileged_action(self, raw: Mapping[str, Any]) -> ServiceResult:
        """Perform the privileged action if the user may.

        Not being allowed is a successful "no action" result, not an error.
        """
        op = "privileged_action"
        parsed = parse_user(raw)
        if isinstance(parsed, Failure):
            return ServiceResult.from_violation(op, parsed.violation)
        user = parsed.value

        action = perform_privileged_action(user, required_privilege=self._required_privilege)
        if action is None:
            logger.debug("No privileged action for %s (%s)", user.username, user.role)
            return ServiceResult(
                ok=True,
                op=op,
                data={"performed": False, "username": user.username, "role": user.role},
            )

        logger.info("Privileged action performed by %s", action.performed_by)
        warnings: list[str] = []
        self._dispatch_event(
            "post_privileged_action",
            {"username": action.performed_by, "privilege": action.privilege},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            warnings=warnings,
            data={
                "performed": True,
                "username": action.performed_by,
                "role": user.role,
                "privilege": action.privilege,
                "secret": str(action.secret),
            },
        )
