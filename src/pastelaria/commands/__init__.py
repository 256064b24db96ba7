"""Subcommand modules for pastelaria.

Provides register_commands() which uses deferred imports to keep
``pastelaria --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    3 groups (one per record kind) + 1 standalone command.
    """
    # --- Groups ---
    from pastelaria.commands.customer import customer
    from pastelaria.commands.product import product
    from pastelaria.commands.product_type import product_type

    cli.add_command(customer)
    cli.add_command(product_type)
    cli.add_command(product)

    # --- Standalone commands ---
    from pastelaria.commands.init_cmd import init_cmd

    cli.add_command(init_cmd)
