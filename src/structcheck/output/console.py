"""Rich console and theme for human-readable output.

Consoles render into a StringIO so ``format_result`` can return a plain
string; the caller decides where it is echoed. Rich drops colour codes on
its own when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

STRUCTCHECK_THEME = Theme(
    {
        "sc.ok": "bold green",
        "sc.error": "bold red",
        "sc.warning": "bold yellow",
        "sc.op": "bold cyan",
        "sc.key": "dim",
        "sc.path": "bold",
        "sc.schema": "magenta",
        "sc.valid": "green",
        "sc.invalid": "bold red",
    }
)

# Width of the verdict column in per-document listings.
_VERDICT_WIDTH = 9


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed console writing to an in-memory buffer.

    Args:
        no_color: Strip ANSI codes even on a colour terminal.
        width: Fixed render width; 120 columns when omitted.
    """
    return Console(
        file=StringIO(),
        theme=STRUCTCHECK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Return everything rendered so far on a console from create_console()."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def verdict(valid: bool) -> Text:
    """Styled, padded ``valid`` / ``invalid`` label for one document."""
    if valid:
        return Text("valid".ljust(_VERDICT_WIDTH), style="sc.valid")
    return Text("invalid".ljust(_VERDICT_WIDTH), style="sc.invalid")
