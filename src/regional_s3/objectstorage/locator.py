"""Resolution of the client that must serve a bucket.

A resolution runs in three steps:

    1. Lookup: ask the active client where the bucket lives.
    2. Resolve: return the pooled client for that region if there is one.
    3. Provision: otherwise create a client for the region, add it to the
       pool and make it active.

A resolution costs at most two round trips: one location query (plus its
existence check) and at most one client construction. Provisioning failures
propagate; there is no retry.
"""

from dataclasses import dataclass
from typing import Optional

from regional_s3.core import get_logger, get_tracer
from regional_s3.core.exceptions import RegionNotProvisionedError
from regional_s3.objectstorage.clients import ClientHandle, RegionalClientFactory
from regional_s3.objectstorage.pool import ClientPool
from regional_s3.objectstorage.regions import Region
from regional_s3.objectstorage.resolver import RegionResolver

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a bucket or region to a client handle."""

    handle: ClientHandle
    region: Region
    provisioned: bool


class BucketClientLocator:
    """Finds, and provisions when needed, the client handle for a bucket."""

    def __init__(
        self,
        pool: ClientPool,
        factory: RegionalClientFactory,
        profile: Optional[str] = None,
        resolver: Optional[RegionResolver] = None,
    ):
        self.pool = pool
        self.factory = factory
        self.profile = profile
        self.resolver = resolver or RegionResolver()

    def resolve(self, bucket: str) -> Resolution:
        """Resolve the client handle that must serve ``bucket``.

        Raises:
            BucketNotFoundError: If the bucket does not exist; the pool is
                left unchanged
            ClientCreationError: If a client for the bucket's region cannot
                be created
            NoActiveClientError: If the pool has no active client
        """
        with tracer.start_as_current_span("resolve_bucket_client") as span:
            span.set_attribute("s3.bucket", bucket)

            active = self.pool.get_active()
            region = self.resolver.location_of(active, bucket)
            span.set_attribute("s3.region", region.code)

            handle = self.pool.lookup(region)
            if handle is not None:
                logger.debug(
                    "Bucket served by pooled client", bucket=bucket, region=region.code
                )
                span.set_attribute("s3.provisioned", False)
                return Resolution(handle=handle, region=region, provisioned=False)

            logger.info(
                "Provisioning client for bucket", bucket=bucket, region=region.code
            )
            resolution = self.provision(region)
            span.set_attribute("s3.provisioned", resolution.provisioned)
            return resolution

    def resolve_client_for_bucket(self, bucket: str) -> ClientHandle:
        """Return the handle that must serve ``bucket``."""
        return self.resolve(bucket).handle

    def provision(self, region: Region, activate: bool = True) -> Resolution:
        """Return the pooled handle for ``region``, creating it if missing.

        Args:
            region: Region to provision
            activate: Make the handle active; applies to existing handles too

        Raises:
            ClientCreationError: If the client cannot be created
        """
        handle = self.pool.lookup(region)
        provisioned = False
        if handle is None:
            handle = self.factory.create(self.profile, region)
            self.pool.insert(handle)
            provisioned = True
            logger.info(
                "Regional client provisioned",
                region=region.code,
                pool_size=len(self.pool),
            )

        if activate:
            self.pool.set_active(handle)
        return Resolution(handle=handle, region=region, provisioned=provisioned)

    def change_region(self, region: Region) -> ClientHandle:
        """Make the pooled client for ``region`` active.

        Unlike bucket resolution this never provisions.

        Raises:
            RegionNotProvisionedError: If the pool has no client for the region
        """
        logger.info("Changing active region", region=region.code)
        handle = self.pool.lookup(region)
        if handle is None:
            raise RegionNotProvisionedError(region.code)
        self.pool.set_active(handle)
        return handle
