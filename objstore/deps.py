"""Shared storage dependency."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objstore.storage.adapter import ObjectStorageAdapter

_storage: "ObjectStorageAdapter | None" = None


def get_storage() -> "ObjectStorageAdapter":
    """Get or lazily initialize the storage singleton.

    Lazy initialization avoids failures at import time when the provider is unavailable.
    """
    global _storage
    if _storage is None:
        from objstore.storage.factory import build_storage

        _storage = build_storage()
    return _storage


def reset_storage() -> None:
    """Drop the cached adapter so the next ``get_storage()`` rebuilds it."""
    global _storage
    _storage = None


__all__ = ["get_storage", "reset_storage"]
