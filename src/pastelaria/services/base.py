"""BaseService — abstract foundation for pastelaria services.

Every service receives a :class:`DataStore` at construction time. The
store provides transactional access to the database and image files;
repositories built from it own their transaction boundaries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pastelaria.infrastructure.datastore import DataStore


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class RecordService(BaseService):
            def create(self, fields: dict) -> ServiceResult:
                entity = self._repo.create(fields)
                ...
    """

    def __init__(self, store: DataStore) -> None:
        self._store = store
