"""Exception hierarchy for regional-s3."""

from typing import Optional


class RegionalS3Error(Exception):
    """Base exception for all regional-s3 errors."""

    pass


class ValidationError(RegionalS3Error):
    """Raised when validation fails."""

    pass


class BucketNotFoundError(RegionalS3Error):
    """Raised when a bucket does not exist for the active client."""

    def __init__(self, bucket: str):
        self.bucket = bucket
        super().__init__(f"Bucket not found: {bucket}")


class UnknownRegionCodeError(RegionalS3Error):
    """Raised when a location code has no canonical region."""

    def __init__(self, code: Optional[str]):
        self.code = code
        super().__init__(f"Unknown region code: {code!r}")


class ClientCreationError(RegionalS3Error):
    """Raised when credentials cannot be resolved or a client cannot be built.

    The underlying cause is chained via ``raise ... from``.
    """

    def __init__(self, region: str, profile: Optional[str], reason: str):
        self.region = region
        self.profile = profile
        super().__init__(
            f"Failed to create S3 client for region '{region}'"
            f" (profile={profile!r}): {reason}"
        )


class RegionNotProvisionedError(RegionalS3Error):
    """Raised when switching to a region that has no client yet."""

    def __init__(self, region: str):
        self.region = region
        super().__init__(f"No client provisioned for region: {region}")


class NoActiveClientError(RegionalS3Error):
    """Raised when the client pool is used before any client exists."""

    def __init__(self):
        super().__init__("Client pool has no active client")


class RpcFailureError(RegionalS3Error):
    """Raised when a storage call fails or returns a non-success status."""

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ):
        self.operation = operation
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(f"S3 {operation} failed: {message}")
