"""Pluggy hook specifications for enrollctl lifecycle events.

Hooks are how the outside world hears about accepted enrolments and
performed privileged actions. Hook payloads are plain data; plugins never
receive raw requests.
"""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("enrollctl")
hookimpl = pluggy.HookimplMarker("enrollctl")


class EnrollctlHookSpec:
    """Hook specifications for the enrollctl plugin system."""

    @hookspec
    def post_enroll(self, student: dict[str, Any]) -> None:
        """Called after a validated student has been saved."""

    @hookspec
    def post_privileged_action(self, username: str, privilege: str) -> None:
        """Called after a system admin performed the privileged action."""
