"""DataStore — transactional session shared by every repository.

The DataStore is the single dependency injected into repositories and
services. It owns the database engine and the image store. The
:meth:`DataStore.transaction` context manager coordinates DB writes and
image files so that a failed operation leaves no trace:

- **DB**: Native SQLAlchemy ``engine.begin()`` with auto-commit/rollback.
- **Images**: Compensation-based — images stored during the transaction
  are deleted on rollback. File writes cannot join the database
  transaction, so this is best-effort and never masks the original error.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pastelaria.infrastructure.database.engine import db_path_for, init_database
from pastelaria.infrastructure.images import ImageStore

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from pastelaria.config.settings import PastelSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StoreTransaction — yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active transaction context with DB connection and tracked image writes.

    Images must be written through :meth:`store_image` so the DataStore
    can compensate on rollback.
    """

    conn: Connection
    images: ImageStore
    _stored: list[str] = field(default_factory=list, repr=False)

    def store_image(self, payload: str, *, field: str = "photo") -> str:
        """Persist an inline image payload, tracking it for rollback."""
        reference = self.images.store(payload, field=field)
        self._stored.append(reference)
        return reference

    def is_image_reference(self, value: str) -> bool:
        """Return True if *value* already names a stored image."""
        return self.images.is_reference(value)

    def compensate(self) -> None:
        """Delete images stored in this transaction (best-effort)."""
        for reference in reversed(self._stored):
            try:
                self.images.discard(reference)
            except OSError:
                logger.warning("Failed to remove image after rollback: %s", reference)
            else:
                logger.debug("Removed image %s after rollback", reference)


# ---------------------------------------------------------------------------
# DataStore
# ---------------------------------------------------------------------------


class DataStore:
    """Database + image storage behind one transaction boundary.

    Constructed once at CLI startup from :class:`PastelSettings`.
    """

    def __init__(self, settings: PastelSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            settings.root,
            settings.database.filename,
            echo=settings.database.echo,
        )
        self._images = ImageStore(
            settings.storage_root,
            directory=settings.storage.image_dir,
            default_extension=settings.storage.default_extension,
        )

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def images(self) -> ImageStore:
        """The image store."""
        return self._images

    @property
    def settings(self) -> PastelSettings:
        """The resolved settings for this store."""
        return self._settings

    @property
    def db_path(self) -> Path:
        """Location of the SQLite database file."""
        return db_path_for(self._settings.root, self._settings.database.filename)

    def close(self) -> None:
        """Release pooled database connections."""
        self._engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Run the enclosed block as one all-or-nothing unit.

        Commits when the block exits normally. On any exception the DB
        transaction rolls back, images stored inside the block are
        deleted, and the exception propagates unchanged.

        Usage::

            with store.transaction() as txn:
                ref = txn.store_image(payload)
                txn.conn.execute(insert(products).values(photo=ref, ...))
        """
        txn: StoreTransaction | None = None
        try:
            with self._engine.begin() as conn:
                txn = StoreTransaction(conn=conn, images=self._images)
                yield txn
        except BaseException:
            # Also covers a failure raised by the commit itself.
            if txn is not None:
                txn.compensate()
            raise
