"""Inline binary payload validation for image ingestion.

A payload is accepted only when it is *genuine* base64: decoding and
re-encoding reproduces the exact input. Strings that merely look encoded
(bad padding, truncated, stray characters) fail the round-trip.
"""

from __future__ import annotations

import base64
import binascii
import mimetypes
import re

_DATA_URI = re.compile(r"^data:(?P<media_type>[\w.+-]+/[\w.+-]+)?;base64,", re.IGNORECASE)

# Media types whose extension mimetypes gets wrong or platform-dependent.
_MEDIA_EXTENSIONS: dict[str, str] = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}

_MAGIC_NUMBERS: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "png"),
    (b"\xff\xd8\xff", "jpg"),
    (b"GIF87a", "gif"),
    (b"GIF89a", "gif"),
)


def is_genuine_encoded_binary(value: str) -> bool:
    """Return True if *value* is non-empty, round-trip exact base64.

    Total over all strings: malformed input returns False, never raises.

    Examples:
        >>> is_genuine_encoded_binary("aGVsbG8=")
        True
        >>> is_genuine_encoded_binary("aGVsbG8")
        False
        >>> is_genuine_encoded_binary("")
        False
    """
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError, TypeError):
        return False
    if not decoded:
        return False
    return base64.b64encode(decoded).decode("ascii") == value


def split_data_uri(payload: str) -> tuple[str | None, str]:
    """Strip an optional ``data:<media-type>;base64,`` prefix.

    Returns ``(media_type, body)``; *media_type* is None when the payload
    carries no prefix.
    """
    match = _DATA_URI.match(payload)
    if match is None:
        return None, payload
    media_type = match.group("media_type")
    return (media_type.lower() if media_type else None), payload[match.end() :]


def extension_for(media_type: str | None, raw: bytes, default: str) -> str:
    """Pick a file extension for decoded content.

    Resolution order: declared media type, magic-number sniffing of
    *raw*, then *default*.
    """
    if media_type:
        known = _MEDIA_EXTENSIONS.get(media_type)
        if known:
            return known
        guessed = mimetypes.guess_extension(media_type)
        if guessed:
            return guessed.lstrip(".")

    for magic, ext in _MAGIC_NUMBERS:
        if raw.startswith(magic):
            return ext
    if raw[:4] == b"RIFF" and raw[8:12] == b"WEBP":
        return "webp"

    return default
