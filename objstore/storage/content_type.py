"""Content-type classification from a payload's leading bytes."""

from __future__ import annotations

import logging

import filetype

from objstore.storage.contracts import ContentTypeError

logger = logging.getLogger(__name__)


def classify(data: bytes, *, bucket: str | None = None, key: str | None = None) -> str:
    """Return the MIME type matching the magic bytes at the start of ``data``.

    Raises:
        ContentTypeError: if ``data`` is not a byte string or does not match
            any known file signature.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        # filetype treats a str as a filesystem path, so reject it here
        raise ContentTypeError(
            op="classify",
            bucket=bucket,
            key=key,
            message=f"expected bytes, got {type(data).__name__}",
        )

    kind = filetype.guess(bytes(data))
    if kind is None:
        logger.warning("Unknown file type for bucket=%s key=%s", bucket, key)
        raise ContentTypeError(op="classify", bucket=bucket, key=key, message="unknown file type")

    return kind.mime


__all__ = ["classify"]
