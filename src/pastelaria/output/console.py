"""Rich Console factory and theme for pastelaria output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PASTEL_THEME = Theme(
    {
        "pastel.ok": "bold green",
        "pastel.error": "bold red",
        "pastel.warning": "bold yellow",
        "pastel.op": "bold cyan",
        "pastel.key": "dim",
        "pastel.id": "bold blue",
        "pastel.name": "bold",
        "pastel.price": "magenta",
        "pastel.path": "dim",
        "pastel.state.active": "green",
        "pastel.state.soft_deleted": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PASTEL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_state(state: str) -> str:
    """Return the Rich style name for a record state."""
    return f"pastel.state.{state}" if state in ("active", "soft_deleted") else ""
