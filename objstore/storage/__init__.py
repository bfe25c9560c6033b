"""Storage package: object storage abstraction."""

from objstore.storage.adapter import ObjectStorageAdapter
from objstore.storage.contracts import (
    ContentTypeError,
    ObjectStore,
    StorageConfigurationError,
    StorageError,
    StorageNotInitializedError,
    StorageNotSupportedError,
    StorageTransportError,
)
from objstore.storage.minio_impl import MinioStorage
from objstore.storage.models import AdapterOptions, ProviderConfig

__all__ = [
    "AdapterOptions",
    "ContentTypeError",
    "MinioStorage",
    "ObjectStorageAdapter",
    "ObjectStore",
    "ProviderConfig",
    "StorageConfigurationError",
    "StorageError",
    "StorageNotInitializedError",
    "StorageNotSupportedError",
    "StorageTransportError",
]
