"""Database engine setup for SQLite with WAL mode.

SQLAlchemy Core (not ORM) is used: repositories issue explicit
statements inside ``engine.begin()`` blocks, so there is no session
state or identity map to keep in sync with soft-delete scoping.
The DB is stored at ``{root}/.pastelaria/{filename}``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from pastelaria.infrastructure.database.schema import metadata

DATA_DIRNAME = ".pastelaria"
DEFAULT_DB_FILENAME = "pastelaria.db"


def db_path_for(root: Path, filename: str = DEFAULT_DB_FILENAME) -> Path:
    """Return the database file location under *root*."""
    return root / DATA_DIRNAME / filename


def create_db_engine(db_path: Path, *, echo: bool = False) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=echo)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(
    root: Path,
    filename: str = DEFAULT_DB_FILENAME,
    *,
    echo: bool = False,
) -> Engine:
    """Initialize the database at ``{root}/.pastelaria/{filename}``.

    Creates the data directory and all tables from
    :data:`schema.metadata`. Idempotent — safe to call on an existing
    database.

    Returns the engine ready for use.
    """
    db_path = db_path_for(root, filename)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(db_path, echo=echo)
    metadata.create_all(engine)
    return engine
