"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op``; unknown ops fall through to a generic
key-value renderer.  Text is always passed as :class:`rich.text.Text`
so literal brackets such as ``[ERROR]`` are never parsed as markup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from elapsed.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from elapsed.services.result import ServiceResult

ERROR_TAG = "[ERROR]"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, color: bool = False) -> str:
    """Render a ServiceResult to a (optionally styled) string."""
    console = create_console(color=color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal, unstyled output for ``--quiet`` mode."""
    if not result.ok:
        return f"{ERROR_TAG} {_error_message(result)}"
    text = result.data.get("text")
    if text is not None:
        return str(text)
    return ""


# ── Helpers ───────────────────────────────────────────────────────────


def _error_message(result: ServiceResult) -> str:
    return result.error.message if result.error else "Unknown error"


def _key_value(console: Console, key: str, value: Any, style: str = "") -> None:
    line = Text(f"  {key}: ", style="elapsed.key")
    line.append(str(value), style=style)
    console.print(line)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_since(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    console.print(Text(str(data.get("text", "")), style="elapsed.text"))
    if not verbose:
        return
    _key_value(console, "from", data.get("from", ""), "elapsed.date")
    _key_value(console, "to", data.get("to", ""), "elapsed.date")
    _key_value(console, "format", data.get("format", ""))
    for key, value in data.get("duration", {}).items():
        _key_value(console, key, value, "elapsed.count")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    for key, value in result.data.items():
        _key_value(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    line = Text(ERROR_TAG, style="elapsed.error")
    line.append(f" {_error_message(result)}")
    console.print(line)
    if verbose and result.error is not None:
        _key_value(console, "code", result.error.code)
        for key, value in result.error.detail.items():
            _key_value(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "since": _render_since,
}
