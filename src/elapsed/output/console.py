"""Rich Console factory and theme for elapsed output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  Styling is emitted only when
the caller asks for *color*; the buffer itself is never a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ELAPSED_THEME = Theme(
    {
        "elapsed.error": "bold red",
        "elapsed.warning": "bold yellow",
        "elapsed.text": "bold",
        "elapsed.key": "dim",
        "elapsed.date": "cyan",
        "elapsed.count": "magenta",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Force ANSI styling even though the buffer is not a terminal.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ELAPSED_THEME,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
