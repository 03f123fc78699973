"""Regional S3 client construction."""

from .s3_client import ClientHandle, RegionalClientFactory, S3ClientConfig

__all__ = ["ClientHandle", "RegionalClientFactory", "S3ClientConfig"]
