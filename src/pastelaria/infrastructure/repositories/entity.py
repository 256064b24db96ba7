"""Generic soft-delete repository, specialized per record kind.

One :class:`EntityRepository` serves customers, product types, and
products. The differences between kinds live in :class:`EntityKind`:
which table, which entity model, which fields are writable, and which
:class:`WriteHook` strategies run before a create or update is written.

Every public operation runs inside its own ``DataStore.transaction()``:
commit on success, rollback (and image compensation) on any failure,
with the original exception propagating unchanged. Id lookups follow
the scope rules in :mod:`pastelaria.domain.lifecycle`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from sqlalchemy import insert, select, update

from pastelaria.domain.errors import NotFoundError
from pastelaria.domain.lifecycle import (
    LookupScope,
    RecordState,
    is_valid_transition,
    scope_for,
    state_of,
)
from pastelaria.domain.records import Entity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Connection, Select, Table
    from sqlalchemy.engine import RowMapping

    from pastelaria.infrastructure.datastore import DataStore, StoreTransaction

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class WriteHook(Protocol):
    """Per-kind step run inside the transaction before the row is written."""

    def before_write(
        self,
        txn: StoreTransaction,
        values: dict[str, Any],
        *,
        current: RowMapping | None,
    ) -> dict[str, Any]:
        """Return the (possibly rewritten) values to persist.

        *current* is the existing row on update, None on create.
        Raising aborts the operation and rolls the transaction back.
        """
        ...


@dataclass(frozen=True)
class EntityKind(Generic[E]):
    """Everything that distinguishes one record kind from another."""

    name: str
    table: Table
    model: type[E]
    fields: tuple[str, ...]
    hooks: tuple[WriteHook, ...] = ()


class EntityRepository(Generic[E]):
    """Transactional create/read/update/soft-delete/restore for one kind."""

    def __init__(self, store: DataStore, kind: EntityKind[E]) -> None:
        self._store = store
        self._kind = kind

    @property
    def kind(self) -> EntityKind[E]:
        return self._kind

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(self) -> list[E]:
        """Active records ordered by name."""
        return self._list(LookupScope.ACTIVE)

    def list_trashed(self) -> list[E]:
        """Soft-deleted records ordered by name."""
        return self._list(LookupScope.TRASHED)

    def find(self, record_id: int) -> E:
        """Active-scope lookup.

        Raises:
            NotFoundError: If no active record has *record_id*.
        """
        with self._store.transaction() as txn:
            row = self._lookup(txn.conn, record_id, scope_for("find"))
        return self._to_entity(row)

    def find_only_trashed(self, record_id: int) -> E:
        """Soft-deleted-scope lookup.

        Raises:
            NotFoundError: If no soft-deleted record has *record_id*.
        """
        with self._store.transaction() as txn:
            row = self._lookup(txn.conn, record_id, scope_for("find_only_trashed"))
        return self._to_entity(row)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, fields: Mapping[str, Any]) -> E:
        """Insert a new active record.

        Kind hooks run first (e.g. reference checks, image ingestion);
        any failure rolls back and propagates unchanged.
        """
        values = self._writable(fields)
        table = self._kind.table

        with self._store.transaction() as txn:
            for hook in self._kind.hooks:
                values = hook.before_write(txn, values, current=None)

            now = _now_iso()
            result = txn.conn.execute(
                insert(table).values(**_to_columns(values), created_at=now, updated_at=now)
            )
            record_id = int(result.inserted_primary_key[0])
            row = self._lookup(txn.conn, record_id, LookupScope.ANY)

        logger.debug("Created %s %d", self._kind.name, record_id)
        return self._to_entity(row)

    def update(self, record_id: int, fields: Mapping[str, Any]) -> E:
        """Merge *fields* into an active record.

        Only supplied fields are overwritten. Soft-deleted records are not
        updatable.

        Raises:
            NotFoundError: If no active record has *record_id*.
        """
        values = self._writable(fields)
        table = self._kind.table

        with self._store.transaction() as txn:
            current = self._lookup(txn.conn, record_id, scope_for("update"))
            for hook in self._kind.hooks:
                values = hook.before_write(txn, values, current=current)

            txn.conn.execute(
                update(table)
                .where(table.c.id == record_id)
                .values(**_to_columns(values), updated_at=_now_iso())
            )
            row = self._lookup(txn.conn, record_id, LookupScope.ANY)

        logger.debug("Updated %s %d: %s", self._kind.name, record_id, sorted(values))
        return self._to_entity(row)

    def destroy(self, record_id: int) -> None:
        """Soft-delete a record by stamping ``deleted_at``.

        Matches the id regardless of state. An already soft-deleted
        record is left untouched, keeping its original ``deleted_at``.

        Raises:
            NotFoundError: If no record has *record_id* at all.
        """
        table = self._kind.table

        with self._store.transaction() as txn:
            current = self._lookup(txn.conn, record_id, scope_for("destroy"))
            if not is_valid_transition(state_of(current["deleted_at"]), RecordState.SOFT_DELETED):
                logger.debug("%s %d already soft-deleted", self._kind.name, record_id)
                return
            txn.conn.execute(
                update(table).where(table.c.id == record_id).values(deleted_at=_now_iso())
            )

        logger.debug("Soft-deleted %s %d", self._kind.name, record_id)

    def restore(self, record_id: int) -> E:
        """Clear ``deleted_at`` on a soft-deleted record.

        An active record is not restorable.

        Raises:
            NotFoundError: If no soft-deleted record has *record_id*.
        """
        table = self._kind.table

        with self._store.transaction() as txn:
            self._lookup(txn.conn, record_id, scope_for("restore"))
            txn.conn.execute(update(table).where(table.c.id == record_id).values(deleted_at=None))
            row = self._lookup(txn.conn, record_id, LookupScope.ANY)

        logger.debug("Restored %s %d", self._kind.name, record_id)
        return self._to_entity(row)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _list(self, scope: LookupScope) -> list[E]:
        table = self._kind.table
        stmt = _scoped(select(table), table, scope).order_by(table.c.name, table.c.id)
        with self._store.transaction() as txn:
            rows = txn.conn.execute(stmt).mappings().all()
        return [self._to_entity(row) for row in rows]

    def _lookup(self, conn: Connection, record_id: int, scope: LookupScope) -> RowMapping:
        table = self._kind.table
        stmt = _scoped(select(table).where(table.c.id == record_id), table, scope)
        row = conn.execute(stmt).mappings().first()
        if row is None:
            raise NotFoundError(self._kind.name, record_id, scope)
        return row

    def _writable(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        unknown = set(fields) - set(self._kind.fields)
        if unknown:
            msg = f"Not writable on {self._kind.name}: {sorted(unknown)}"
            raise ValueError(msg)
        return dict(fields)

    def _to_entity(self, row: RowMapping) -> E:
        return self._kind.model.model_validate(dict(row))


def _scoped(stmt: Select[Any], table: Table, scope: LookupScope) -> Select[Any]:
    """Restrict *stmt* to the records visible in *scope*."""
    if scope is LookupScope.ACTIVE:
        return stmt.where(table.c.deleted_at.is_(None))
    if scope is LookupScope.TRASHED:
        return stmt.where(table.c.deleted_at.is_not(None))
    return stmt


def _to_columns(values: Mapping[str, Any]) -> dict[str, Any]:
    """Convert domain values to their text column representation."""
    converted: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, Decimal):
            converted[key] = str(value)
        elif isinstance(value, (date, datetime)):
            converted[key] = value.isoformat()
        else:
            converted[key] = value
    return converted


def _now_iso() -> str:
    """Current UTC time as ISO 8601 with microseconds."""
    return datetime.now(UTC).isoformat()
