"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are chosen by the shape of ``result.data``: record listings become a
table, single records and mutations become key-value fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pastelaria.output.console import create_console, get_output, style_for_state

if TYPE_CHECKING:
    from rich.console import Console

    from pastelaria.services.result import ServiceResult

# Envelope columns shown after the kind-specific ones.
_ENVELOPE = ("id", "created_at", "updated_at", "deleted_at", "state")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if not result.ok:
        _render_error(result, console, verbose=verbose)
    elif "items" in result.data:
        _render_item_table(result, console, verbose=verbose)
    else:
        _render_record(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="pastel.ok")
    op = Text(f"  {result.op}", style="pastel.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pastel.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="pastel.id")
    elif key == "name":
        v = Text(str(value), style="pastel.name")
    elif key == "price":
        v = Text(str(value), style="pastel.price")
    elif key == "photo":
        v = Text(str(value), style="pastel.path")
    elif key == "state":
        v = Text(str(value), style=style_for_state(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _columns(items: list[dict[str, Any]], *, verbose: bool) -> list[str]:
    """Column order: id, kind fields, then (verbose) timestamps."""
    keys = [k for k in items[0] if k not in _ENVELOPE]
    columns = ["id", *keys]
    if verbose:
        columns.extend(["created_at", "updated_at", "deleted_at"])
    return columns


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pastel.error")
    op = Text(f"  {result.op}", style="pastel.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_record(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single record or mutation acknowledgement."""
    _status_line(console, result)
    for key, value in result.data.items():
        if value is None and not verbose:
            continue
        if key in ("created_at", "updated_at") and not verbose:
            continue
        _field(console, key, value)


def _render_item_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a record listing as a table."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("No records.", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    columns = _columns(items, verbose=verbose)
    for col in columns:
        style = {"id": "pastel.id", "name": "pastel.name", "price": "pastel.price"}.get(col)
        justify = "right" if col in ("id", "price") else "left"
        table.add_column(col.replace("_", " ").title(), style=style, justify=justify)

    for item in items:
        table.add_row(*("" if item.get(c) is None else str(item.get(c)) for c in columns))

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} records")
