"""Factory for building storage instances from configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from minio import Minio
from minio.credentials import (
    AWSConfigProvider,
    ChainedProvider,
    EnvAWSProvider,
    EnvMinioProvider,
    IamAwsProvider,
)

from objstore.core.config import Settings
from objstore.storage.contracts import StorageConfigurationError
from objstore.storage.minio_impl import MinioStorage
from objstore.storage.models import AdapterOptions, ProviderConfig

if TYPE_CHECKING:
    from objstore.storage.adapter import ObjectStorageAdapter

logger = logging.getLogger(__name__)


def _normalize_endpoint(endpoint: str) -> tuple[str, bool]:
    """Extract host:port from endpoint URL and determine if secure (https).

    Returns:
        Tuple of (host:port, secure_flag)
    """
    parsed = urlparse(endpoint)
    secure = parsed.scheme == "https"
    host = parsed.netloc or parsed.path.rstrip("/")
    return host, secure


def _credential_chain() -> ChainedProvider:
    return ChainedProvider(
        [
            EnvAWSProvider(),
            EnvMinioProvider(),
            AWSConfigProvider(),
            IamAwsProvider(),
        ]
    )


def build_client(config: ProviderConfig) -> Minio:
    """Build a MinIO SDK client from ``config``.

    Static keys are used when both are given; with neither, credentials come
    from the default provider chain.

    Raises:
        StorageConfigurationError: if the endpoint or credentials are unusable.
    """
    endpoint = config.endpoint or ""
    if not endpoint:
        raise StorageConfigurationError("connect", None, None, "endpoint is not set")

    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.netloc or parsed.path not in ("", "/"):
        raise StorageConfigurationError(
            "connect", None, None, f"endpoint must be an http(s) URL with a host and no path, got {endpoint!r}"
        )
    host, secure = _normalize_endpoint(endpoint)

    if bool(config.access_key) != bool(config.secret_key):
        raise StorageConfigurationError(
            "connect", None, None, "access key and secret key must be set together"
        )

    try:
        if config.access_key:
            client = Minio(
                host,
                access_key=config.access_key,
                secret_key=config.secret_key,
                session_token=config.session_token,
                secure=secure,
                region=config.region,
            )
        else:
            client = Minio(host, secure=secure, region=config.region, credentials=_credential_chain())
    except ValueError as exc:
        raise StorageConfigurationError("connect", None, None, str(exc)) from exc

    logger.info("Built storage client for %s (secure=%s, region=%s)", host, secure, config.region)
    return client


def build_object_store(config: ProviderConfig) -> MinioStorage:
    return MinioStorage(build_client(config))


def build_storage(settings: Settings | None = None) -> "ObjectStorageAdapter":
    """Build and initialise an adapter from environment configuration.

    Environment variables:
        S3_ENDPOINT: Full URL to MinIO/S3 endpoint (e.g., http://localhost:9000)
        S3_ACCESS_KEY / S3_SECRET_KEY / S3_SESSION_TOKEN: Static credentials
        S3_REGION: Bucket region
        S3_BUCKET: Target bucket (default: uploads)
        S3_CREATE_BUCKET: Create the bucket when missing (default: false)
        STORAGE_CLASSIFY_CONTENT_TYPE / STORAGE_PROBE_EXISTS / STORAGE_ALLOW_REMOVE:
            Adapter feature switches
    """
    from objstore.storage.adapter import ObjectStorageAdapter

    settings = settings or Settings()
    config = ProviderConfig(
        endpoint=settings.S3_ENDPOINT,
        access_key=settings.S3_ACCESS_KEY,
        secret_key=settings.S3_SECRET_KEY,
        session_token=settings.S3_SESSION_TOKEN,
        region=settings.S3_REGION,
    )
    options = AdapterOptions(
        classify_content_type=settings.STORAGE_CLASSIFY_CONTENT_TYPE,
        probe_exists=settings.STORAGE_PROBE_EXISTS,
        allow_remove=settings.STORAGE_ALLOW_REMOVE,
    )

    storage = ObjectStorageAdapter(settings.S3_BUCKET, config, options=options)
    storage.init()

    if settings.S3_CREATE_BUCKET:
        storage.client.ensure_bucket(settings.S3_BUCKET)

    return storage


__all__ = ["build_client", "build_object_store", "build_storage"]
