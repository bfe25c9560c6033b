"""Pytest configuration and fixtures."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from minio.error import S3Error

from objstore.storage.adapter import ObjectStorageAdapter
from objstore.storage.minio_impl import MinioStorage
from objstore.storage.models import AdapterOptions, ProviderConfig

PNG_PAYLOAD = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


def make_s3_error(code: str, bucket: str | None = None, key: str | None = None) -> S3Error:
    return S3Error(
        response=None,
        code=code,
        message=code,
        resource=f"/{bucket}/{key}",
        request_id="request",
        host_id="host",
        bucket_name=bucket,
        object_name=key,
    )


class FakeMinio:
    """In-memory stand-in for ``minio.Minio`` covering the calls the adapter makes."""

    def __init__(self, buckets=("test-bucket",)):
        self.buckets = set(buckets)
        self.objects = {}
        self.calls = []

    def _check(self, bucket, key=None):
        if bucket not in self.buckets:
            raise make_s3_error("NoSuchBucket", bucket, key)

    def put_object(self, bucket_name, object_name, data, length, content_type="application/octet-stream",
                   metadata=None, **kwargs):
        self.calls.append(("put_object", bucket_name, object_name))
        self._check(bucket_name, object_name)
        self.objects[(bucket_name, object_name)] = SimpleNamespace(
            data=data.read(length), content_type=content_type, metadata=metadata or {}
        )

    def get_object(self, bucket_name, object_name):
        self.calls.append(("get_object", bucket_name, object_name))
        self._check(bucket_name, object_name)
        try:
            stored = self.objects[(bucket_name, object_name)]
        except KeyError:
            raise make_s3_error("NoSuchKey", bucket_name, object_name) from None
        response = MagicMock()
        response.read.return_value = stored.data
        response.headers = {"content-type": stored.content_type}
        return response

    def stat_object(self, bucket_name, object_name):
        self.calls.append(("stat_object", bucket_name, object_name))
        # HEAD responses carry no error body; the SDK reports any 404 on an
        # object as NoSuchKey, missing bucket included.
        try:
            stored = self.objects[(bucket_name, object_name)]
        except KeyError:
            raise make_s3_error("NoSuchKey", bucket_name, object_name) from None
        return SimpleNamespace(
            content_type=stored.content_type,
            size=len(stored.data),
            etag="etag",
            metadata=dict(stored.metadata),
        )

    def remove_object(self, bucket_name, object_name):
        self.calls.append(("remove_object", bucket_name, object_name))
        self._check(bucket_name, object_name)
        self.objects.pop((bucket_name, object_name), None)

    def bucket_exists(self, bucket_name):
        self.calls.append(("bucket_exists", bucket_name))
        return bucket_name in self.buckets

    def make_bucket(self, bucket_name):
        self.buckets.add(bucket_name)


@pytest.fixture
def fake_minio():
    return FakeMinio()


@pytest.fixture
def provider_config():
    return ProviderConfig(endpoint="http://minio:9000", access_key="ak", secret_key="s3cr3t")


@pytest.fixture
def make_adapter(fake_minio, provider_config):
    """Build an adapter wired to the in-memory fake client."""

    def _make(bucket="test-bucket", **options):
        return ObjectStorageAdapter(
            bucket,
            provider_config,
            options=AdapterOptions(**options),
            client=MinioStorage(fake_minio),
        )

    return _make


@pytest.fixture
def png_payload():
    return PNG_PAYLOAD
