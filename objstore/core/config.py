"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MinIO / S3
    S3_ENDPOINT: str = "http://localhost:9000"
    S3_ACCESS_KEY: str | None = None
    S3_SECRET_KEY: str | None = None
    S3_SESSION_TOKEN: str | None = None
    S3_REGION: str | None = None
    S3_BUCKET: str = "uploads"
    S3_CREATE_BUCKET: bool = False

    # Adapter behaviour
    STORAGE_CLASSIFY_CONTENT_TYPE: bool = True
    STORAGE_PROBE_EXISTS: bool = True
    STORAGE_ALLOW_REMOVE: bool = False

    # Application
    APP_ENV: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Global settings instance
settings = Settings()
