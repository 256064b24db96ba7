"""Command group: products, including inline photo upload."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING

import click

from pastelaria.commands._base import PastelGroup
from pastelaria.commands._records import add_lifecycle_commands, emit_update, record_service

if TYPE_CHECKING:
    from pastelaria.commands._context import AppContext


def _photo_options(func: click.decorators.FC) -> click.decorators.FC:
    func = click.option(
        "--photo-file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Image file to upload as the photo.",
    )(func)
    return click.option(
        "--photo",
        default=None,
        help="Base64 photo payload, optionally as a data URI.",
    )(func)


def encode_photo_file(path: Path) -> str:
    """Read *path* and return it as a base64 data URI."""
    media_type, _ = mimetypes.guess_type(path.name)
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{media_type or 'application/octet-stream'};base64,{encoded}"


def _photo(photo: str | None, photo_file: Path | None) -> str | None:
    if photo is not None and photo_file is not None:
        raise click.UsageError("Use either --photo or --photo-file, not both.")
    if photo_file is not None:
        return encode_photo_file(photo_file)
    return photo


@click.group(
    cls=PastelGroup,
    examples="""\
  pastelaria product create "Beef Pastel" --price 10.50 --type 1 --photo-file pastel.png
  pastelaria product list
  pastelaria product update 3 --price 11.00
  pastelaria product delete 3""",
)
def product() -> None:
    """Manage products."""


@product.command(
    examples="""\
  pastelaria product create "Beef Pastel" --price 10.50 --type 1
  pastelaria product create "Cheese Pastel" --price 9.00 --type 1 --photo-file cheese.jpg
  pastelaria product create "Cheese Pastel" --price 9.00 --type 1 --photo "data:image/png;base64,..." """,
)
@click.argument("name")
@click.option("--price", required=True, help="Unit price, e.g. 10.50.")
@click.option("--type", "product_type_id", type=int, required=True, help="Product type ID.")
@_photo_options
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    price: str,
    product_type_id: int,
    photo: str | None,
    photo_file: Path | None,
) -> None:
    """Create a product called NAME."""
    fields: dict[str, object] = {
        "name": name,
        "price": price,
        "product_type_id": product_type_id,
    }
    payload = _photo(photo, photo_file)
    if payload is not None:
        fields["photo"] = payload
    app.emit(record_service(app, "product").create(fields))


@product.command(
    examples="""\
  pastelaria product update 3 --price 11.00
  pastelaria product update 3 --type 2
  pastelaria product update 3 --photo-file new-photo.png""",
)
@click.argument("record_id", metavar="ID", type=int)
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--type", "product_type_id", type=int, default=None, help="New product type ID.")
@_photo_options
@click.pass_obj
def update(
    app: AppContext,
    record_id: int,
    name: str | None,
    price: str | None,
    product_type_id: int | None,
    photo: str | None,
    photo_file: Path | None,
) -> None:
    """Update an active product. Only given options change."""
    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = name
    if price is not None:
        changes["price"] = price
    if product_type_id is not None:
        changes["product_type_id"] = product_type_id
    payload = _photo(photo, photo_file)
    if payload is not None:
        changes["photo"] = payload
    emit_update(app, "product", record_id, changes)


add_lifecycle_commands(product, "product")
