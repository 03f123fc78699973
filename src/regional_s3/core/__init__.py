"""Core utilities and shared components for regional-s3."""

from .config import settings
from .exceptions import RegionalS3Error, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "RegionalS3Error",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
