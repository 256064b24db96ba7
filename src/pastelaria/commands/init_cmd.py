"""Command: data root initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pastelaria.commands._base import PastelCommand

if TYPE_CHECKING:
    from pastelaria.commands._context import AppContext

_INIT_EXAMPLES = """\
  pastelaria init
  pastelaria --root /srv/pastelaria init
  pastelaria --json init"""


@click.command("init", cls=PastelCommand, examples=_INIT_EXAMPLES)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the config file, database, and image directory."""
    from pastelaria.services.init import InitService

    app.emit(InitService.init_root(app.settings))
