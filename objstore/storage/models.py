"""Configuration models for the storage adapter."""

from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """Connection settings for an S3-compatible provider.

    When neither key is set, credentials are resolved from the environment,
    the AWS config file or IAM at request time.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str = "http://localhost:9000"
    access_key: str | None = None
    secret_key: str | None = Field(default=None, repr=False)
    session_token: str | None = Field(default=None, repr=False)
    region: str | None = None


class AdapterOptions(BaseModel):
    """Feature switches for ``ObjectStorageAdapter``."""

    model_config = ConfigDict(frozen=True)

    classify_content_type: bool = True
    probe_exists: bool = True
    allow_remove: bool = False
