"""Bucket-scoped object storage adapter."""

from __future__ import annotations

import logging
import threading

from objstore.storage import factory
from objstore.storage.content_type import classify
from objstore.storage.contracts import (
    ObjectStore,
    StorageNotInitializedError,
    StorageNotSupportedError,
    StorageTransportError,
)
from objstore.storage.models import AdapterOptions, ProviderConfig

logger = logging.getLogger(__name__)


class ObjectStorageAdapter:
    """Reads and writes whole objects in a single bucket.

    The provider client is either injected at construction or built from
    ``config`` by ``init()``. ``bucket`` and ``config`` never change after
    construction.

    Usage::

        storage = ObjectStorageAdapter("uploads", ProviderConfig(endpoint="http://minio:9000"))
        storage.init()
        storage.write("images/a.png", png_bytes)
        data = storage.read("images/a.png")
    """

    def __init__(
        self,
        bucket: str,
        config: ProviderConfig,
        *,
        options: AdapterOptions | None = None,
        client: ObjectStore | None = None,
    ):
        self._bucket = bucket
        self._config = config
        self._options = options or AdapterOptions()
        self._client = client
        self._init_lock = threading.Lock()

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def options(self) -> AdapterOptions:
        return self._options

    @property
    def client(self) -> ObjectStore | None:
        return self._client

    def init(self) -> None:
        """Build the provider client from ``config``.

        Calling it again replaces the client.

        Raises:
            StorageConfigurationError: if the client cannot be built.
        """
        client = factory.build_object_store(self._config)
        with self._init_lock:
            self._client = client
        logger.info("Storage adapter ready for bucket %s", self._bucket)

    def _require_client(self, op: str, key: str) -> ObjectStore:
        client = self._client
        if client is None:
            raise StorageNotInitializedError(op, self._bucket, key, "init() has not been called")
        return client

    def write(self, key: str, payload: bytes) -> None:
        """Upload ``payload`` under ``key``.

        With content-type classification enabled, an unrecognised payload is
        rejected with ``ContentTypeError`` before any request is made.
        """
        client = self._require_client("put", key)

        content_type = None
        if self._options.classify_content_type:
            content_type = classify(payload, bucket=self._bucket, key=key)

        client.put_bytes(self._bucket, key, payload, content_type=content_type)
        logger.debug("Wrote %s/%s (%d bytes, %s)", self._bucket, key, len(payload), content_type)

    def read(self, key: str) -> bytes:
        client = self._require_client("get", key)
        data, _ = client.get_bytes(self._bucket, key)
        return data

    def exists(self, key: str) -> bool:
        """Probe for ``key`` with a metadata-only request.

        Returns ``False`` when the provider reports the object as missing;
        other failures are raised.
        """
        if not self._options.probe_exists:
            raise StorageNotSupportedError("head", self._bucket, key, "exists not supported")

        client = self._require_client("head", key)
        try:
            client.head(self._bucket, key)
        except StorageTransportError as exc:
            if client.is_not_found(exc):
                return False
            raise
        return True

    def remove(self, key: str) -> None:
        if not self._options.allow_remove:
            raise StorageNotSupportedError("delete", self._bucket, key, "remove not supported")

        client = self._require_client("delete", key)
        client.delete(self._bucket, key)
        logger.info("Removed %s/%s", self._bucket, key)

    def __repr__(self) -> str:
        return f"ObjectStorageAdapter(bucket={self._bucket!r}, endpoint={self._config.endpoint!r})"


__all__ = ["ObjectStorageAdapter"]
