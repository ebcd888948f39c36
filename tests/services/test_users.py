"""Tests for UserService — user boundary and privileged action."""

from __future__ import annotations

from typing import Any

import pluggy

from enrollctl.plugins.manager import PluginManager
from enrollctl.services.users import UserService

hookimpl = pluggy.HookimplMarker("enrollctl")


class _ActionRecorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    @hookimpl
    def post_privileged_action(self, username: str, privilege: str) -> None:
        self.calls.append((username, privilege))


class TestDescribeUser:
    def test_describes_basic_user(self, basic_user_data: dict[str, Any]) -> None:
        result = UserService().describe_user(basic_user_data)
        assert result.ok
        assert result.data["role"] == "basic"
        assert result.data["username"] == "alice"
        assert result.data["id"] == basic_user_data["id"]
        assert "alice" in result.data["description"]

    def test_malformed_record(self, basic_user_data: dict[str, Any]) -> None:
        result = UserService().describe_user({**basic_user_data, "role": "root"})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_INPUT"


class TestPrivilegedAction:
    def test_system_admin_with_special(self, system_admin_data: dict[str, Any]) -> None:
        result = UserService().privileged_action(system_admin_data)
        assert result.ok
        assert result.data["performed"] is True
        assert result.data["privilege"] == "Special"
        assert result.data["secret"] == "**********"

    def test_system_admin_without_special(self, system_admin_data: dict[str, Any]) -> None:
        data = {**system_admin_data, "admin_privileges": ["Basic"]}
        result = UserService().privileged_action(data)
        assert result.ok
        assert result.data["performed"] is False

    def test_customer_admin_is_no_action(self, customer_admin_data: dict[str, Any]) -> None:
        result = UserService().privileged_action(customer_admin_data)
        assert result.ok
        assert result.data == {"performed": False, "username": "carol", "role": "customer_admin"}

    def test_basic_user_is_no_action(self, basic_user_data: dict[str, Any]) -> None:
        result = UserService().privileged_action(basic_user_data)
        assert result.ok
        assert result.data["performed"] is False

    def test_configured_privilege(self, system_admin_data: dict[str, Any]) -> None:
        service = UserService(required_privilege="Basic")
        assert service.privileged_action(system_admin_data).data["privilege"] == "Basic"
        other = UserService(required_privilege="Launch")
        assert other.privileged_action(system_admin_data).data["performed"] is False

    def test_malformed_record(self, system_admin_data: dict[str, Any]) -> None:
        data = {k: v for k, v in system_admin_data.items() if k != "nuclear_secret"}
        result = UserService().privileged_action(data)
        assert not result.ok
        assert result.error is not None
        assert "nuclear_secret" in result.error.message

    def test_notifies_plugins(self, system_admin_data: dict[str, Any]) -> None:
        pm = PluginManager()
        recorder = _ActionRecorder()
        pm.register_plugin(recorder)
        UserService(plugins=pm).privileged_action(system_admin_data)
        assert recorder.calls == [("root", "Special")]

    def test_no_action_does_not_notify(self, basic_user_data: dict[str, Any]) -> None:
        pm = PluginManager()
        recorder = _ActionRecorder()
        pm.register_plugin(recorder)
        UserService(plugins=pm).privileged_action(basic_user_data)
        assert recorder.calls == []
