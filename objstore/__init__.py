"""Bucket-scoped object storage adapter for S3-compatible providers."""

__version__ = "0.1.0"
