"""Lifecycle subcommands shared by every record group.

Each record group (customer, product-type, product) gets ``list``,
``trashed``, ``show``, ``delete`` and ``restore``; only ``create`` and
``update`` differ per kind and live in the group's own module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from pastelaria.commands._base import PastelCommand

if TYPE_CHECKING:
    from pastelaria.commands._context import AppContext
    from pastelaria.services.records import RecordService


def record_service(app: AppContext, kind: str) -> RecordService:
    """Build the RecordService for *kind* on the app's store."""
    from pastelaria.services.records import RecordService

    return RecordService(app.store, kind)


def emit_update(app: AppContext, kind: str, record_id: int, changes: dict[str, Any]) -> None:
    """Apply *changes* or fail early when nothing was given."""
    if not changes:
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)
    app.emit(record_service(app, kind).update(record_id, changes))


def add_lifecycle_commands(group: click.Group, kind: str) -> None:
    """Attach the read, delete and restore subcommands for *kind* to *group*."""
    label = kind.replace("_", " ")
    prog = f"pastelaria {group.name}"

    @group.command(
        "list",
        cls=PastelCommand,
        help=f"List active {label}s ordered by name.",
        examples=f"  {prog} list\n  pastelaria --json {group.name} list",
    )
    @click.pass_obj
    def list_cmd(app: AppContext) -> None:
        app.emit(record_service(app, kind).list())

    @group.command(
        "trashed",
        cls=PastelCommand,
        help=f"List soft-deleted {label}s.",
        examples=f"  {prog} trashed\n  pastelaria -q {group.name} trashed",
    )
    @click.pass_obj
    def trashed_cmd(app: AppContext) -> None:
        app.emit(record_service(app, kind).list_trashed())

    @group.command(
        "show",
        cls=PastelCommand,
        help=f"Show an active {label} by ID.",
        examples=f"  {prog} show 1\n  pastelaria --json {group.name} show 1",
    )
    @click.argument("record_id", metavar="ID", type=int)
    @click.pass_obj
    def show_cmd(app: AppContext, record_id: int) -> None:
        app.emit(record_service(app, kind).show(record_id))

    @group.command(
        "delete",
        cls=PastelCommand,
        help=f"Soft-delete a {label}; it can be restored later.",
        examples=f"  {prog} delete 1",
    )
    @click.argument("record_id", metavar="ID", type=int)
    @click.pass_obj
    def delete_cmd(app: AppContext, record_id: int) -> None:
        app.emit(record_service(app, kind).destroy(record_id))

    @group.command(
        "restore",
        cls=PastelCommand,
        help=f"Restore a soft-deleted {label}.",
        examples=f"  {prog} restore 1",
    )
    @click.argument("record_id", metavar="ID", type=int)
    @click.pass_obj
    def restore_cmd(app: AppContext, record_id: int) -> None:
        app.emit(record_service(app, kind).restore(record_id))
