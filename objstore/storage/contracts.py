"""Storage interfaces and error types."""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


class StorageError(Exception):
    """Wraps underlying storage exceptions with operation context."""

    def __init__(self, op: str, bucket: str | None, key: str | None, message: str):
        self.op = op
        self.bucket = bucket
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        bucket_repr = self.bucket or "<unknown>"
        key_repr = self.key or "<unknown>"
        return f"{self.op} failed for bucket={bucket_repr} key={key_repr}: {self.message}"


class StorageConfigurationError(StorageError):
    """The provider client could not be built from the given configuration."""


class ContentTypeError(StorageError):
    """Payload was rejected because its content type could not be classified."""


class StorageTransportError(StorageError):
    """Provider or network failure during a request."""

    def __init__(
        self,
        op: str,
        bucket: str | None,
        key: str | None,
        message: str,
        code: str | None = None,
    ):
        self.code = code
        super().__init__(op, bucket, key, message)


class StorageNotSupportedError(StorageError, NotImplementedError):
    """Operation is disabled for this adapter."""


class StorageNotInitializedError(StorageError):
    """An I/O operation was attempted before ``init()``."""


@runtime_checkable
class ObjectStore(Protocol):
    """Contract for the provider collaborator used by the adapter."""

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> str:
        ...

    def get_bytes(self, bucket: str, key: str) -> tuple[bytes, Mapping[str, str]]:
        ...

    def head(self, bucket: str, key: str) -> Mapping[str, str]:
        ...

    def delete(self, bucket: str, key: str) -> None:
        ...

    def ensure_bucket(self, name: str) -> None:
        ...

    def is_not_found(self, exc: BaseException) -> bool:
        ...


__all__ = [
    "StorageError",
    "StorageConfigurationError",
    "ContentTypeError",
    "StorageTransportError",
    "StorageNotSupportedError",
    "StorageNotInitializedError",
    "ObjectStore",
]
