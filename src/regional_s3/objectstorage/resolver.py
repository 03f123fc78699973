"""Bucket to region resolution."""

from botocore.exceptions import ClientError

from regional_s3.core import get_logger
from regional_s3.core.exceptions import BucketNotFoundError
from regional_s3.objectstorage.clients import ClientHandle
from regional_s3.objectstorage.regions import Region, translate_location_code
from regional_s3.objectstorage.rpc import RPC_FAULTS, error_code, rpc_failure

logger = get_logger(__name__)

_MISSING_BUCKET_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})


class RegionResolver:
    """Maps bucket names to the region that owns them.

    Locations are never cached: every call queries the service.
    """

    translate_location_code = staticmethod(translate_location_code)

    def bucket_exists(self, handle: ClientHandle, bucket: str) -> bool:
        """Check whether ``bucket`` exists as seen from ``handle``.

        A 403 means the bucket exists but belongs to another account.

        Raises:
            RpcFailureError: If the check fails for any other reason
        """
        try:
            handle.client.head_bucket(Bucket=bucket)
            return True
        except ClientError as e:
            code = error_code(e)
            if code in _MISSING_BUCKET_CODES:
                return False
            if code in ("403", "AccessDenied"):
                logger.debug("Bucket exists but access is denied", bucket=bucket)
                return True
            raise rpc_failure("head_bucket", e) from e
        except RPC_FAULTS as e:
            raise rpc_failure("head_bucket", e) from e

    def query_location(self, handle: ClientHandle, bucket: str) -> Region:
        """Issue a location query without checking existence first.

        Raises:
            RpcFailureError: If the location query fails
            UnknownRegionCodeError: If the returned code has no mapping
        """
        try:
            response = handle.client.get_bucket_location(Bucket=bucket)
        except RPC_FAULTS as e:
            raise rpc_failure("get_bucket_location", e) from e

        return self.translate_location_code(response.get("LocationConstraint"))

    def location_of(self, handle: ClientHandle, bucket: str) -> Region:
        """Return the region that owns ``bucket``.

        Existence is checked before the location query because location
        queries on missing buckets are not reliable.

        Raises:
            BucketNotFoundError: If the bucket does not exist
            RpcFailureError: If either call fails
            UnknownRegionCodeError: If the location code has no mapping
        """
        if not self.bucket_exists(handle, bucket):
            logger.info(
                "Bucket not found", bucket=bucket, via_region=handle.region.code
            )
            raise BucketNotFoundError(bucket)

        region = self.query_location(handle, bucket)
        logger.debug("Bucket location resolved", bucket=bucket, region=region.code)
        return region
