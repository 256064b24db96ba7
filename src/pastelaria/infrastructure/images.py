"""Image store — decodes inline base64 payloads into files on disk.

Stored images live under ``{storage_root}/{directory}/`` with opaque
generated names. Callers persist only the returned *reference*, a
storage-relative POSIX path such as ``img/3f2a...c1.png``.

Writes are atomic from the caller's perspective: bytes land in a hidden
temp file in the target directory and are renamed into place, so a
failed write never leaves a partial image visible under its final name.
There is no deduplication: storing the same payload twice yields two
files with distinct references.
"""

from __future__ import annotations

import base64
import logging
import os
import tempfile
import uuid
from pathlib import Path, PurePosixPath

from pastelaria.domain.blobs import extension_for, is_genuine_encoded_binary, split_data_uri
from pastelaria.domain.errors import InvalidBinaryContentError

logger = logging.getLogger(__name__)


class ImageStore:
    """File-backed content store for product images."""

    def __init__(
        self,
        root: Path,
        *,
        directory: str = "img",
        default_extension: str = "bin",
    ) -> None:
        self._root = root
        self._directory = directory
        self._default_extension = default_extension.lstrip(".")

    @property
    def root(self) -> Path:
        """The storage root that references are relative to."""
        return self._root

    @property
    def directory(self) -> Path:
        """Absolute directory holding stored images."""
        return self._root / self._directory

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def store(self, payload: str, *, field: str = "photo") -> str:
        """Validate, decode, and persist *payload*; return its reference.

        *payload* may carry a ``data:<media-type>;base64,`` prefix, which
        is stripped before validation and used to pick the extension.

        Raises:
            InvalidBinaryContentError: If the payload body is not genuine
                base64 (see :func:`is_genuine_encoded_binary`).
            OSError: If the file cannot be written.
        """
        media_type, body = split_data_uri(payload)
        if not is_genuine_encoded_binary(body):
            raise InvalidBinaryContentError(field)

        raw = base64.b64decode(body, validate=True)
        ext = extension_for(media_type, raw, self._default_extension)
        filename = f"{uuid.uuid4().hex}.{ext}"

        target = self.directory / filename
        _atomic_write(target, raw)

        reference = str(PurePosixPath(self._directory) / filename)
        logger.debug("Stored image %s (%d bytes)", reference, len(raw))
        return reference

    def discard(self, reference: str) -> None:
        """Remove a stored image. Missing files are ignored."""
        self.resolve(reference).unlink(missing_ok=True)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def resolve(self, reference: str) -> Path:
        """Resolve a reference to its absolute path inside the store.

        Raises:
            ValueError: If the reference escapes the image directory.
        """
        path = self._root / PurePosixPath(reference)
        if not path.resolve().is_relative_to(self.directory.resolve()):
            msg = f"Reference escapes image store: {reference!r}"
            raise ValueError(msg)
        return path

    def is_reference(self, value: str) -> bool:
        """Return True if *value* names an image already in this store."""
        if not value.startswith(f"{self._directory}/"):
            return False
        try:
            return self.resolve(value).is_file()
        except ValueError:
            return False


def _atomic_write(target: Path, data: bytes) -> None:
    """Write *data* to *target* via temp file + rename."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".tmp-", suffix=target.suffix)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, target)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
