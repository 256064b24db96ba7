"""Soft-delete lifecycle and lookup-scope policy.

Every record cycles between two states driven by the nullable
``deleted_at`` marker:

- ``active``: ``deleted_at`` is NULL; visible to default queries.
- ``soft_deleted``: ``deleted_at`` is set; visible only to trashed queries.

Each repository operation resolves its target id in exactly one lookup
scope. A lookup miss in the required scope is a ``NOT_FOUND`` and the
operation must not attempt its write.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum


class RecordState(StrEnum):
    """Visibility state of a stored record."""

    ACTIVE = "active"
    SOFT_DELETED = "soft_deleted"


class LookupScope(StrEnum):
    """Which records an id lookup may match."""

    ACTIVE = "active"
    TRASHED = "trashed"
    ANY = "any"


# --- Transition map ---

RECORD_TRANSITIONS: dict[str, list[str]] = {
    "active": ["soft_deleted"],  # destroy
    "soft_deleted": ["active"],  # restore
}

# --- Operation → lookup scope ---

OPERATION_SCOPES: dict[str, LookupScope] = {
    "find": LookupScope.ACTIVE,
    "update": LookupScope.ACTIVE,
    "destroy": LookupScope.ANY,
    "restore": LookupScope.TRASHED,
    "find_only_trashed": LookupScope.TRASHED,
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = RECORD_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


def state_of(deleted_at: datetime | str | None) -> RecordState:
    """Derive the record state from its soft-delete marker."""
    if deleted_at is None:
        return RecordState.ACTIVE
    return RecordState.SOFT_DELETED


def scope_for(operation: str) -> LookupScope:
    """Return the lookup scope an operation must use.

    Raises:
        KeyError: If *operation* has no registered scope.
    """
    return OPERATION_SCOPES[operation]

