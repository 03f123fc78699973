"""Region-aware access to S3-compatible object storage."""

from .clients import ClientHandle, RegionalClientFactory, S3ClientConfig
from .locator import BucketClientLocator, Resolution
from .outcome import ErrorKind, OperationOutcome
from .pool import ClientPool
from .regions import Region, translate_location_code
from .resolver import RegionResolver
from .s3_operations import StorageFacade
from .session import RegionalS3Session

__all__ = [
    "BucketClientLocator",
    "ClientHandle",
    "ClientPool",
    "ErrorKind",
    "OperationOutcome",
    "Region",
    "RegionResolver",
    "RegionalClientFactory",
    "RegionalS3Session",
    "Resolution",
    "S3ClientConfig",
    "StorageFacade",
    "translate_location_code",
]
