"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from enrollctl.output.console import create_console, get_output, style_for_role

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from enrollctl.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="enroll.ok"), Text(f"  {result.op}", style="enroll.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="enroll.key"), Text(str(value), style=style), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="enroll.error"),
        Text(f"  {result.op}", style="enroll.op"),
        Text(" — "),
        msg,
    )
    if verbose and err is not None:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)


def _render_student(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "name", data.get("name", ""), "enroll.name")
    _field(console, "age", data.get("age", ""))
    _field(console, "courses", ", ".join(data.get("courses", [])), "enroll.course")


def _render_user(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "username", data.get("username", ""), "enroll.name")
    _field(console, "role", data.get("role", ""), style_for_role(data.get("role", "")))
    if "description" in data:
        _field(console, "description", data["description"])


def _render_privileged_action(result: ServiceResult, console: Console) -> None:
    _render_user(result, console)
    data = result.data
    if data.get("performed"):
        _field(console, "action", f"performed with privilege {data.get('privilege')}")
        _field(console, "secret", data.get("secret", ""))
    else:
        _field(console, "action", "none")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "add_student": _render_student,
    "auto_enroll": _render_student,
    "describe_user": _render_user,
    "privileged_action": _render_privileged_action,
}
