"""Alembic migration infrastructure for pastelaria.

Provides programmatic Alembic configuration — no alembic.ini needed.
The migration scripts live alongside this module.
"""

from __future__ import annotations

from pathlib import Path

from alembic.config import Config


def build_config(db_url: str) -> Config:
    """Build an Alembic Config pointing at our migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).parent))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def stamp_head(db_path: Path) -> None:
    """Stamp a database as at the current head revision.

    Called during ``pastelaria init`` for a database that already has
    its tables (e.g. one opened by an earlier command).
    """
    from alembic import command

    cfg = build_config(f"sqlite:///{db_path}")
    command.stamp(cfg, "head")


def upgrade_head(db_path: Path) -> None:
    """Apply all pending migrations to the database at *db_path*.

    Called during ``pastelaria init`` to build a new database.
    """
    from alembic import command

    cfg = build_config(f"sqlite:///{db_path}")
    command.upgrade(cfg, "head")
