"""Region-aware access to S3 buckets across AWS regions.

This package keeps one S3 client per region for a single account, works out
which region owns a bucket before touching it, and creates the client for a
new region the first time a bucket there is used.

Key Features:
    - One session object per account, owning its regional client pool
    - Bucket to region resolution with on-demand client provisioning
    - Bucket and object operations (list, create, upload, download, delete,
      restore, version listing)
    - Distinct errors per failure, with an optional yes/no projection
    - CLI interface

Recommended Usage:
    >>> from regional_s3 import RegionalS3Session
    >>> session = RegionalS3Session.from_profile("default", "us-east-1")
    >>> session.upload_file("logs-eu", "report.csv", "/tmp/report.csv")
    True

Advanced Usage:
    The building blocks can be composed directly:

    >>> from regional_s3.objectstorage import ClientPool, BucketClientLocator
"""

__version__ = "0.1.0"

from .core.exceptions import (
    BucketNotFoundError,
    ClientCreationError,
    NoActiveClientError,
    RegionalS3Error,
    RegionNotProvisionedError,
    RpcFailureError,
    UnknownRegionCodeError,
    ValidationError,
)
from .objectstorage import (
    ErrorKind,
    OperationOutcome,
    Region,
    RegionalS3Session,
    S3ClientConfig,
)

__all__ = [
    # Session
    "RegionalS3Session",
    "S3ClientConfig",
    "Region",
    # Outcomes
    "ErrorKind",
    "OperationOutcome",
    # Errors
    "BucketNotFoundError",
    "ClientCreationError",
    "NoActiveClientError",
    "RegionalS3Error",
    "RegionNotProvisionedError",
    "RpcFailureError",
    "UnknownRegionCodeError",
    "ValidationError",
]
