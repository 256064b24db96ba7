"""Tests for the soft-delete lifecycle and lookup scopes."""

from datetime import UTC, datetime

import pytest

from pastelaria.domain.lifecycle import (
    OPERATION_SCOPES,
    RECORD_TRANSITIONS,
    LookupScope,
    RecordState,
    is_valid_transition,
    scope_for,
    state_of,
)


class TestTransitions:
    def test_destroy_and_restore_allowed(self) -> None:
        assert is_valid_transition("active", "soft_deleted")
        assert is_valid_transition("soft_deleted", "active")

    def test_same_state_not_a_transition(self) -> None:
        assert not is_valid_transition("active", "active")
        assert not is_valid_transition("soft_deleted", "soft_deleted")

    def test_unknown_state(self) -> None:
        assert not is_valid_transition("purged", "active")

    def test_every_state_has_transitions(self) -> None:
        assert set(RECORD_TRANSITIONS) == {s.value for s in RecordState}


class TestStateOf:
    def test_null_marker_is_active(self) -> None:
        assert state_of(None) is RecordState.ACTIVE

    def test_set_marker_is_soft_deleted(self) -> None:
        assert state_of(datetime.now(UTC)) is RecordState.SOFT_DELETED
        assert state_of("2024-01-01T00:00:00+00:00") is RecordState.SOFT_DELETED


class TestScopes:
    @pytest.mark.parametrize(
        ("operation", "scope"),
        [
            ("find", LookupScope.ACTIVE),
            ("update", LookupScope.ACTIVE),
            ("destroy", LookupScope.ANY),
            ("restore", LookupScope.TRASHED),
            ("find_only_trashed", LookupScope.TRASHED),
        ],
    )
    def test_scope_for(self, operation: str, scope: LookupScope) -> None:
        assert scope_for(operation) is scope

    def test_unknown_operation(self) -> None:
        with pytest.raises(KeyError):
            scope_for("purge")

    def test_table_complete(self) -> None:
        assert len(OPERATION_SCOPES) == 5
