"""InitService — prepare a data root for first use.

Pipeline: CONFIG → MIGRATE (new DB) or STAMP (existing DB) → STORAGE → RESPOND
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from pastelaria.config.discovery import CONFIG_FILENAME
from pastelaria.infrastructure.database.engine import db_path_for
from pastelaria.infrastructure.database.migrations import stamp_head, upgrade_head
from pastelaria.infrastructure.datastore import DataStore
from pastelaria.services.result import ServiceResult

if TYPE_CHECKING:
    from pastelaria.config.settings import PastelSettings

logger = logging.getLogger(__name__)

_CONFIG_TEMPLATE = """\
# pastelaria configuration — only overrides are needed here.

[database]
filename = "{filename}"

[storage]
directory = "{directory}"
image_dir = "{image_dir}"
"""


class InitService:
    """Creates the config file, database, and image directory."""

    @staticmethod
    def init_root(settings: PastelSettings) -> ServiceResult:
        """Initialize ``settings.root``. Safe to run on an existing root."""
        op = "init"
        root = settings.root
        warnings: list[str] = []

        try:
            root.mkdir(parents=True, exist_ok=True)
            config_path = root / CONFIG_FILENAME
            if config_path.exists():
                warnings.append(f"Kept existing {CONFIG_FILENAME}")
            else:
                config_path.write_text(
                    _CONFIG_TEMPLATE.format(
                        filename=settings.database.filename,
                        directory=settings.storage.directory,
                        image_dir=settings.storage.image_dir,
                    ),
                    encoding="utf-8",
                )

            db_path = db_path_for(root, settings.database.filename)
            if db_path.exists():
                stamp_head(db_path)
            else:
                db_path.parent.mkdir(parents=True, exist_ok=True)
                upgrade_head(db_path)

            store = DataStore(settings)
            try:
                store.images.directory.mkdir(parents=True, exist_ok=True)
            finally:
                store.close()
        except (SQLAlchemyError, OSError) as exc:
            logger.error("init failed: %s", type(exc).__name__, exc_info=True)
            return ServiceResult.failure(
                op,
                "PERSISTENCE_FAILURE",
                f"Could not initialize {root}: {exc}",
                error_type=type(exc).__name__,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "root": str(root),
                "config": str(config_path),
                "database": str(store.db_path),
                "images": str(store.images.directory),
            },
            warnings=warnings,
        )
