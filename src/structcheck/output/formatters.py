"""Rich/JSON output for ServiceResult.

The CLI renders a ServiceResult for humans (Rich, one line per checked
document) or for machines (``--json``, the full model). ``--quiet``
keeps only the status line.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from structcheck.output.console import create_console, get_output, verdict

if TYPE_CHECKING:
    from rich.console import Console

    from structcheck.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _status_text(result)

    console = create_console()
    _status_line(console, result)
    renderer = _OP_RENDERERS.get(result.op, _render_generic)
    renderer(result, console)
    if settings.verbose and result.meta:
        for key, value in result.meta.items():
            console.print(Text(f"  {key}: {value}", style="sc.key"))
    return get_output(console).rstrip("\n")


def _status_text(result: ServiceResult) -> str:
    if result.ok:
        return f"OK: {result.op}"
    message = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op}: {message}"


def _status_line(console: Console, result: ServiceResult) -> None:
    if result.ok:
        console.print(Text("OK", style="sc.ok"), Text(result.op, style="sc.op"))
        return
    message = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="sc.error"),
        Text(result.op, style="sc.op"),
        Text(message),
    )


def _render_check(result: ServiceResult, console: Console) -> None:
    data = result.data
    if not data:
        return
    console.print(Text("  schema: ", style="sc.key"), Text(str(data["schema"]), style="sc.schema"), sep="")
    for doc in data.get("documents", []):
        console.print("  ", verdict(doc["valid"]), Text(doc["path"], style="sc.path"), sep="", soft_wrap=True)
    console.print(
        Text(f"  {data['valid']} valid, {data['invalid']} invalid", style="sc.key"),
    )


def _render_describe(result: ServiceResult, console: Console) -> None:
    data = result.data
    if not data:
        return
    console.print(Text("  schema: ", style="sc.key"), Text(str(data["schema"]), style="sc.schema"), sep="")
    console.print(Text(f"  {data['notation']}"), soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console) -> None:
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="sc.key"), Text(str(value)), sep="")


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Any], None]] = {
    "check": _render_check,
    "describe": _render_describe,
}
