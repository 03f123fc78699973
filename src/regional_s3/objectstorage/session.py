"""Session object owning one account's regional client pool.

Each session has its own pool and active client, so several sessions (for
example one per account) can coexist in a process.

Example:
    >>> session = RegionalS3Session.from_profile("prod", "us-east-1")
    >>> session.list_bucket_contents("logs-eu")   # provisions eu-west-1
    >>> session.active_region
    Region(code='eu-west-1')
"""

from typing import Any, Callable, Dict, Optional

from botocore.config import Config

from regional_s3.core import get_logger
from regional_s3.objectstorage.clients import (
    ClientHandle,
    RegionalClientFactory,
    S3ClientConfig,
)
from regional_s3.objectstorage.locator import BucketClientLocator
from regional_s3.objectstorage.outcome import OperationOutcome
from regional_s3.objectstorage.pool import ClientPool
from regional_s3.objectstorage.regions import Region, RegionLike, as_region
from regional_s3.objectstorage.s3_operations import StorageFacade

logger = get_logger(__name__)


class RegionalS3Session:
    """Region-aware S3 access for a single credential source."""

    def __init__(
        self,
        config: S3ClientConfig,
        region: RegionLike,
        boto_config: Optional[Config] = None,
    ):
        """Create the session and provision its initial region.

        Args:
            config: Credential and endpoint configuration
            region: Initial region; its client becomes the active client
            boto_config: Optional botocore Config applied to every client

        Raises:
            ClientCreationError: If the initial client cannot be created
            UnknownRegionCodeError: If ``region`` is not a known region code
        """
        self.config = config
        self.pool = ClientPool()
        self.factory = RegionalClientFactory(config, boto_config=boto_config)
        self.locator = BucketClientLocator(
            self.pool, self.factory, profile=config.aws_profile
        )
        self.storage = StorageFacade(self.locator)

        initial = as_region(region)
        self.locator.provision(initial)
        logger.info(
            "Regional S3 session created",
            region=initial.code,
            profile=config.aws_profile,
        )

    @classmethod
    def from_profile(
        cls,
        profile: str,
        region: RegionLike,
        endpoint_url: Optional[str] = None,
    ) -> "RegionalS3Session":
        """Create a session whose clients use a named credential profile."""
        config = S3ClientConfig(aws_profile=profile, endpoint_url=endpoint_url)
        return cls(config, region)

    @classmethod
    def from_credentials(
        cls,
        access_key_id: str,
        secret_access_key: str,
        region: RegionLike,
        session_token: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> "RegionalS3Session":
        """Create a session whose clients use explicit keys."""
        config = S3ClientConfig(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            endpoint_url=endpoint_url,
        )
        return cls(config, region)

    @property
    def profile(self) -> Optional[str]:
        return self.config.aws_profile

    @property
    def active_client(self) -> ClientHandle:
        return self.pool.get_active()

    @property
    def active_region(self) -> Region:
        return self.pool.get_active().region

    @property
    def regions(self) -> list[Region]:
        return self.pool.regions

    @property
    def active_bucket_name(self) -> str:
        return self.storage.active_bucket_name

    # Region management
    def change_region(self, region: RegionLike) -> ClientHandle:
        """Switch the active client to an already provisioned region.

        Raises:
            RegionNotProvisionedError: If no client exists for the region
        """
        return self.locator.change_region(as_region(region))

    def add_new_region(self, region: RegionLike) -> ClientHandle:
        """Provision a client for ``region`` without changing the active one."""
        return self.locator.provision(as_region(region), activate=False).handle

    def client_for_bucket(self, bucket: str) -> ClientHandle:
        """Resolve, provisioning if needed, the client that serves ``bucket``."""
        return self.locator.resolve_client_for_bucket(bucket)

    def list_profiles(self) -> list[str]:
        return self.factory.list_profiles()

    # Storage operations
    def list_buckets(self) -> list[Dict[str, Any]]:
        return self.storage.list_buckets()

    def list_buckets_in_region(self, region: RegionLike) -> list[Dict[str, Any]]:
        return self.storage.list_buckets_in_region(as_region(region))

    def create_bucket(self, bucket: str, region: RegionLike) -> bool:
        return self.storage.create_bucket(bucket, as_region(region))

    def list_bucket_contents(
        self, bucket: str, max_keys: Optional[int] = None
    ) -> list[Dict[str, Any]]:
        return self.storage.list_bucket_contents(bucket, max_keys=max_keys)

    def list_object_versions(
        self, bucket: str, key: str, max_keys: Optional[int] = None
    ) -> list[Dict[str, Any]]:
        return self.storage.list_object_versions(bucket, key, max_keys=max_keys)

    def upload_file(self, bucket: str, key: str, file_path: str) -> bool:
        return self.storage.upload_file(bucket, key, file_path)

    async def upload_file_async(self, bucket: str, key: str, file_path: str) -> bool:
        return await self.storage.upload_file_async(bucket, key, file_path)

    def download_object(
        self,
        bucket: str,
        key: str,
        directory: str,
        version_id: Optional[str] = None,
    ) -> bool:
        return self.storage.download_object(bucket, key, directory, version_id)

    async def download_object_async(
        self,
        bucket: str,
        key: str,
        directory: str,
        version_id: Optional[str] = None,
    ) -> bool:
        return await self.storage.download_object_async(
            bucket, key, directory, version_id
        )

    def delete_object(
        self, bucket: str, key: str, version_id: Optional[str] = None
    ) -> bool:
        return self.storage.delete_object(bucket, key, version_id)

    def delete_bucket(self, bucket: str) -> bool:
        return self.storage.delete_bucket(bucket)

    def restore_object_version(
        self,
        bucket: str,
        key: str,
        version_id: Optional[str] = None,
        days: int = 1,
    ) -> bool:
        return self.storage.restore_object_version(bucket, key, version_id, days)

    # Legacy yes/no projection
    @staticmethod
    def outcome(
        func: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> OperationOutcome:
        """Run an operation and return a tagged outcome instead of raising."""
        return OperationOutcome.capture(func, *args, **kwargs)

    def succeeded(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Run an operation and report only whether it succeeded."""
        return bool(self.outcome(func, *args, **kwargs))
