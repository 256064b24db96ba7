"""Write hooks — per-kind steps run before a repository write.

Hooks are strategies injected through :class:`EntityKind`; they run
inside the repository transaction, in the order the kind lists them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from pastelaria.domain.errors import InactiveReferenceError

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import RowMapping

    from pastelaria.infrastructure.datastore import StoreTransaction


class ActiveReferenceGuard:
    """Require a foreign-key field to point at an active record.

    Checked on create, and on update only when the field changes, so a
    product keeps working after its category is later soft-deleted.
    """

    def __init__(self, field: str, target: Table, target_kind: str) -> None:
        self.field = field
        self.target = target
        self.target_kind = target_kind

    def before_write(
        self,
        txn: StoreTransaction,
        values: dict[str, Any],
        *,
        current: RowMapping | None,
    ) -> dict[str, Any]:
        if self.field not in values:
            return values
        ref_id = values[self.field]
        if current is not None and current[self.field] == ref_id:
            return values

        row = txn.conn.execute(
            select(self.target.c.id).where(
                self.target.c.id == ref_id,
                self.target.c.deleted_at.is_(None),
            )
        ).first()
        if row is None:
            raise InactiveReferenceError(self.target_kind, ref_id, field=self.field)
        return values


class ImageIngestion:
    """Replace an inline base64 image field with a stored reference.

    Values that already name a stored image (e.g. a record re-submitted
    unchanged on update) pass through untouched. A superseded image is
    abandoned on disk, not deleted.
    """

    def __init__(self, field: str = "photo") -> None:
        self.field = field

    def before_write(
        self,
        txn: StoreTransaction,
        values: dict[str, Any],
        *,
        current: RowMapping | None,
    ) -> dict[str, Any]:
        payload = values.get(self.field)
        if payload is None or txn.is_image_reference(payload):
            return values
        return {**values, self.field: txn.store_image(payload, field=self.field)}
