"""MinIO-backed implementation of the storage interfaces."""

from __future__ import annotations

import io
import logging
from typing import Mapping

from minio import Minio
from minio.error import S3Error

from objstore.storage.contracts import ObjectStore, StorageTransportError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# S3 error codes that mean "no such object". HEAD responses carry no body, so
# some servers only report the bare status text.
NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchObject", "NotFound", "ResourceNotFound"})


def _wrap_error(op: str, bucket: str | None, key: str | None, exc: Exception) -> StorageTransportError:
    code = exc.code if isinstance(exc, S3Error) else None
    return StorageTransportError(op=op, bucket=bucket, key=key, message=str(exc), code=code)


class MinioStorage(ObjectStore):
    """Object storage abstraction backed by MinIO SDK."""

    def __init__(self, client: Minio):
        self._client = client

    @property
    def client(self) -> Minio:
        return self._client

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> str:
        logger.debug("put_object bucket=%s key=%s size=%d", bucket, key, len(data))
        try:
            # put_object switches to multipart upload on its own once the
            # length exceeds the SDK part size.
            self._client.put_object(
                bucket_name=bucket,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type or DEFAULT_CONTENT_TYPE,
                metadata=dict(metadata) if metadata else None,
            )
            return f"{bucket}/{key}"
        except Exception as exc:
            raise _wrap_error("put", bucket, key, exc) from exc

    def get_bytes(self, bucket: str, key: str) -> tuple[bytes, Mapping[str, str]]:
        logger.debug("get_object bucket=%s key=%s", bucket, key)
        try:
            obj = self._client.get_object(bucket, key)
            try:
                data = obj.read()
                headers = obj.headers or {}
            finally:
                try:
                    obj.close()
                finally:
                    obj.release_conn()
            return data, headers
        except Exception as exc:
            raise _wrap_error("get", bucket, key, exc) from exc

    def head(self, bucket: str, key: str) -> Mapping[str, str]:
        logger.debug("stat_object bucket=%s key=%s", bucket, key)
        try:
            stat = self._client.stat_object(bucket, key)
        except Exception as exc:
            err = _wrap_error("head", bucket, key, exc)
            # A HEAD 404 has no body, so the SDK reports a missing bucket as
            # NoSuchKey. Ask the bucket directly before calling it a missing object.
            if self.is_not_found(err) and not self._bucket_exists(bucket, key):
                raise StorageTransportError(
                    op="head", bucket=bucket, key=key, message="bucket does not exist", code="NoSuchBucket"
                ) from exc
            raise err from exc
        info = {
            "content-type": stat.content_type or "",
            "content-length": str(stat.size) if stat.size is not None else "",
            "etag": stat.etag or "",
        }
        if stat.metadata:
            info.update({k.lower(): v for k, v in stat.metadata.items()})
        return info

    def delete(self, bucket: str, key: str) -> None:
        logger.debug("remove_object bucket=%s key=%s", bucket, key)
        try:
            self._client.remove_object(bucket, key)
        except Exception as exc:
            raise _wrap_error("delete", bucket, key, exc) from exc

    def _bucket_exists(self, bucket: str, key: str | None = None) -> bool:
        try:
            return self._client.bucket_exists(bucket)
        except Exception as exc:
            raise _wrap_error("head", bucket, key, exc) from exc

    def ensure_bucket(self, name: str) -> None:
        try:
            if not self._client.bucket_exists(name):
                logger.info("Creating bucket %s", name)
                self._client.make_bucket(name)
        except Exception as exc:
            raise _wrap_error("ensure_bucket", name, None, exc) from exc

    def is_not_found(self, exc: BaseException) -> bool:
        if isinstance(exc, StorageTransportError):
            if exc.code is not None:
                return exc.code in NOT_FOUND_CODES
            exc = exc.__cause__
        return isinstance(exc, S3Error) and exc.code in NOT_FOUND_CODES


__all__ = ["MinioStorage", "NOT_FOUND_CODES"]
