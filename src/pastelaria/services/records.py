"""RecordService — validated record lifecycle operations per kind.

Pipeline: VALIDATE → REPOSITORY (one transaction) → RESPOND

Field validation happens here, before any repository call, using the
``*Input`` / ``*Patch`` models. Typed failures raised by the core are
translated into ``ServiceResult`` errors; nothing is dropped silently.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from pastelaria.domain.errors import InactiveReferenceError, InvalidBinaryContentError, NotFoundError
from pastelaria.domain.records import (
    IMMUTABLE_FIELDS,
    CustomerInput,
    CustomerPatch,
    Entity,
    ProductInput,
    ProductPatch,
    ProductTypeInput,
    ProductTypePatch,
    validated_fields,
)
from pastelaria.infrastructure.repositories import repository_for
from pastelaria.services.base import BaseService
from pastelaria.services.result import ServiceResult

if TYPE_CHECKING:
    from pastelaria.infrastructure.datastore import DataStore

logger = logging.getLogger(__name__)

_INPUT_MODELS: dict[str, tuple[type[BaseModel], type[BaseModel]]] = {
    "customer": (CustomerInput, CustomerPatch),
    "product_type": (ProductTypeInput, ProductTypePatch),
    "product": (ProductInput, ProductPatch),
}


class RecordService(BaseService):
    """List, show, create, update, delete, and restore records of one kind."""

    def __init__(self, store: DataStore, kind: str) -> None:
        super().__init__(store)
        self._kind = kind
        self._repo = repository_for(store, kind)
        self._input_model, self._patch_model = _INPUT_MODELS[kind]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list(self) -> ServiceResult:
        """Active records, ordered by name."""
        return self._run(f"list_{self._kind}s", lambda: _items(self._repo.list()))

    def list_trashed(self) -> ServiceResult:
        """Soft-deleted records, ordered by name."""
        return self._run(f"list_trashed_{self._kind}s", lambda: _items(self._repo.list_trashed()))

    def show(self, record_id: int) -> ServiceResult:
        """A single active record."""
        return self._run(f"show_{self._kind}", lambda: _dump(self._repo.find(record_id)))

    def create(self, fields: dict[str, Any]) -> ServiceResult:
        """Validate *fields* and create a record."""

        def action() -> dict[str, Any]:
            values = validated_fields(self._input_model, fields, partial=False)
            return _dump(self._repo.create(values))

        return self._run(f"create_{self._kind}", action)

    def update(self, record_id: int, changes: dict[str, Any]) -> ServiceResult:
        """Validate and apply a partial update to an active record.

        Immutable fields in *changes* are dropped with a warning.
        """
        op = f"update_{self._kind}"
        warnings: list[str] = []
        changes = dict(changes)
        for key in sorted(IMMUTABLE_FIELDS & changes.keys()):
            warnings.append(f"Cannot change immutable field: {key}")
            del changes[key]

        if not changes:
            return ServiceResult.failure(op, "VALIDATION_FAILED", "No changes specified")

        def action() -> dict[str, Any]:
            values = validated_fields(self._patch_model, changes, partial=True)
            return _dump(self._repo.update(record_id, values))

        return self._run(op, action, warnings=warnings)

    def destroy(self, record_id: int) -> ServiceResult:
        """Soft-delete a record."""

        def action() -> dict[str, Any]:
            self._repo.destroy(record_id)
            return {"id": record_id}

        return self._run(f"delete_{self._kind}", action)

    def restore(self, record_id: int) -> ServiceResult:
        """Restore a soft-deleted record."""
        return self._run(f"restore_{self._kind}", lambda: _dump(self._repo.restore(record_id)))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run(
        self,
        op: str,
        action: Callable[[], dict[str, Any]],
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Execute *action* and translate core failures into results."""
        try:
            data = action()
        except ValidationError as exc:
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                "; ".join(_validation_messages(exc)),
                fields=sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()}),
            )
        except InactiveReferenceError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_REFERENCE",
                str(exc),
                field=exc.field,
                kind=exc.kind,
                id=exc.record_id,
            )
        except NotFoundError as exc:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                str(exc),
                kind=exc.kind,
                id=exc.record_id,
                scope=str(exc.scope),
            )
        except InvalidBinaryContentError as exc:
            return ServiceResult.failure(op, "INVALID_BINARY_CONTENT", str(exc), field=exc.field)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("%s failed: %s", op, type(exc).__name__, exc_info=True)
            return ServiceResult.failure(
                op,
                "PERSISTENCE_FAILURE",
                f"Storage error during {op}: {exc}",
                error_type=type(exc).__name__,
            )

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])


def _dump(entity: Entity) -> dict[str, Any]:
    return entity.model_dump(mode="json")


def _items(entities: list[Any]) -> dict[str, Any]:
    return {"items": [_dump(e) for e in entities], "count": len(entities)}


def _validation_messages(exc: ValidationError) -> list[str]:
    messages: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "input"
        messages.append(f"{loc}: {err['msg']}")
    return messages
