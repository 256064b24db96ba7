"""Typed failures raised by the record lifecycle core.

Persistence failures are not wrapped: the store's own
``SQLAlchemyError`` / ``OSError`` propagates unchanged.
"""

from __future__ import annotations

from pastelaria.domain.lifecycle import LookupScope


class NotFoundError(LookupError):
    """No record with the given id exists in the required lookup scope."""

    def __init__(self, kind: str, record_id: int, scope: LookupScope) -> None:
        self.kind = kind
        self.record_id = record_id
        self.scope = scope
        super().__init__(f"No {scope} {kind} found with ID: {record_id}")


class InactiveReferenceError(NotFoundError):
    """A referenced record is missing or soft-deleted."""

    def __init__(self, kind: str, record_id: int, *, field: str) -> None:
        self.field = field
        super().__init__(kind, record_id, LookupScope.ACTIVE)
        self.args = (f"Field {field!r} does not reference an active {kind}: {record_id}",)


class InvalidBinaryContentError(ValueError):
    """An inline payload is not genuine base64-encoded binary content."""

    def __init__(self, field: str = "photo") -> None:
        self.field = field
        super().__init__(f"Field {field!r} does not contain valid base64-encoded content")
