"""Command group: customer records."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import click

from pastelaria.commands._base import PastelGroup
from pastelaria.commands._records import add_lifecycle_commands, emit_update, record_service

if TYPE_CHECKING:
    from pastelaria.commands._context import AppContext

# (option name, field name, help)
_FIELD_OPTIONS: tuple[tuple[str, str, str], ...] = (
    ("--email", "email", "E-mail address."),
    ("--phone", "phone", "Phone number."),
    ("--address", "address", "Street address."),
    ("--complement", "complement", "Address complement (apartment, block)."),
    ("--neighborhood", "neighborhood", "Neighborhood."),
    ("--zip-code", "zip_code", "Postal code."),
)


def _customer_options(func: click.decorators.FC) -> click.decorators.FC:
    for option, name, help_text in reversed(_FIELD_OPTIONS):
        func = click.option(option, name, default=None, help=help_text)(func)
    return click.option(
        "--date-of-birth",
        "date_of_birth",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Date of birth (YYYY-MM-DD).",
    )(func)


def _collect(name: str | None, **fields: object) -> dict[str, object]:
    data: dict[str, object] = {}
    if name is not None:
        data["name"] = name
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, datetime.datetime):
            value = value.date()
        data[key] = value
    return data


@click.group(
    cls=PastelGroup,
    examples="""\
  pastelaria customer create --name "Ana Souza" --email ana@example.com
  pastelaria customer list
  pastelaria customer update 1 --phone "+55 11 99999-0000"
  pastelaria customer delete 1
  pastelaria customer restore 1""",
)
def customer() -> None:
    """Manage customers."""


@customer.command(
    examples="""\
  pastelaria customer create --name "Ana Souza"
  pastelaria customer create --name "Ana Souza" --email ana@example.com --date-of-birth 1990-04-12""",
)
@click.option("--name", required=True, help="Customer name.")
@_customer_options
@click.pass_obj
def create(app: AppContext, name: str, **fields: object) -> None:
    """Create a customer."""
    app.emit(record_service(app, "customer").create(_collect(name, **fields)))


@customer.command(
    examples="""\
  pastelaria customer update 1 --name "Ana S. Souza"
  pastelaria customer update 1 --zip-code 01001-000 --neighborhood Centro""",
)
@click.argument("record_id", metavar="ID", type=int)
@click.option("--name", default=None, help="New name.")
@_customer_options
@click.pass_obj
def update(app: AppContext, record_id: int, name: str | None, **fields: object) -> None:
    """Update an active customer. Only given options change."""
    emit_update(app, "customer", record_id, _collect(name, **fields))


add_lifecycle_commands(customer, "customer")
