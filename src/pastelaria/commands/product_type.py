"""Command group: product types (menu categories)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pastelaria.commands._base import PastelGroup
from pastelaria.commands._records import add_lifecycle_commands, emit_update, record_service

if TYPE_CHECKING:
    from pastelaria.commands._context import AppContext


@click.group(
    "product-type",
    cls=PastelGroup,
    examples="""\
  pastelaria product-type create Savory
  pastelaria product-type list
  pastelaria product-type update 1 --name Sweet""",
)
def product_type() -> None:
    """Manage product types."""


@product_type.command(examples="  pastelaria product-type create Savory")
@click.argument("name")
@click.pass_obj
def create(app: AppContext, name: str) -> None:
    """Create a product type called NAME."""
    app.emit(record_service(app, "product_type").create({"name": name}))


@product_type.command(examples="  pastelaria product-type update 1 --name Sweet")
@click.argument("record_id", metavar="ID", type=int)
@click.option("--name", default=None, help="New name.")
@click.pass_obj
def update(app: AppContext, record_id: int, name: str | None) -> None:
    """Rename an active product type."""
    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = name
    emit_update(app, "product_type", record_id, changes)


add_lifecycle_commands(product_type, "product_type")
