"""Bucket and object operations routed through the regional client pool.

Each bucket-scoped operation first resolves the client that serves the bucket,
then issues a single S3 call. A 2xx status is success; any other status or a
botocore fault raises RpcFailureError. Resolution errors pass through as-is.
"""

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from regional_s3.core import get_logger, settings
from regional_s3.core.exceptions import ValidationError
from regional_s3.objectstorage.locator import BucketClientLocator
from regional_s3.objectstorage.regions import US_EAST_1, Region
from regional_s3.objectstorage.rpc import RPC_FAULTS, check_status, rpc_failure

logger = get_logger(__name__)


def download_target(directory: str, key: str) -> Path:
    """Return the local path for ``key`` under ``directory``.

    Leading slashes are dropped so absolute keys stay under ``directory``.

    Raises:
        ValidationError: If the key resolves outside ``directory``
    """
    root = Path(directory).resolve()
    target = (root / key.lstrip("/")).resolve()
    if target == root or not target.is_relative_to(root):
        raise ValidationError(f"Object key escapes download directory: {key}")
    return target


class StorageFacade:
    """S3 bucket and object operations for one session."""

    def __init__(self, locator: BucketClientLocator):
        self.locator = locator
        self.active_bucket_name = ""

    @property
    def pool(self):
        return self.locator.pool

    # Bucket operations
    def list_buckets(self) -> list[Dict[str, Any]]:
        """List every bucket owned by the account, using the active client."""
        logger.info("Listing buckets")
        client = self.pool.get_active().client
        try:
            response = check_status("list_buckets", client.list_buckets())
        except RPC_FAULTS as e:
            raise rpc_failure("list_buckets", e) from e

        buckets = response.get("Buckets", [])
        logger.info("Buckets listed", bucket_count=len(buckets))
        return buckets

    def list_buckets_in_region(self, region: Region) -> list[Dict[str, Any]]:
        """List the account's buckets located in ``region``.

        Queries each bucket's location in turn, one call per bucket.
        """
        handle = self.pool.get_active()
        buckets = self.list_buckets()
        logger.debug("Filtering buckets by region", region=region.code)

        matches = [
            bucket
            for bucket in buckets
            if self.locator.resolver.query_location(handle, bucket["Name"]) == region
        ]
        logger.info(
            "Buckets filtered by region", region=region.code, bucket_count=len(matches)
        )
        return matches

    def create_bucket(self, bucket: str, region: Region) -> bool:
        """Create ``bucket`` in ``region``.

        The region's client is provisioned if needed and becomes active.
        """
        logger.info("Creating bucket", bucket=bucket, region=region.code)
        handle = self.locator.provision(region).handle

        params: Dict[str, Any] = {"Bucket": bucket}
        if region.code != US_EAST_1:
            params["CreateBucketConfiguration"] = {"LocationConstraint": region.code}

        try:
            check_status("create_bucket", handle.client.create_bucket(**params))
        except RPC_FAULTS as e:
            raise rpc_failure("create_bucket", e) from e

        logger.info("Bucket created", bucket=bucket, region=region.code)
        return True

    def delete_bucket(self, bucket: str) -> bool:
        """Delete ``bucket``; it must already be empty."""
        logger.info("Deleting bucket", bucket=bucket)
        self.active_bucket_name = ""
        handle = self.locator.resolve_client_for_bucket(bucket)
        try:
            check_status("delete_bucket", handle.client.delete_bucket(Bucket=bucket))
        except RPC_FAULTS as e:
            raise rpc_failure("delete_bucket", e) from e
        return True

    # Listing operations
    def list_bucket_contents(
        self, bucket: str, max_keys: Optional[int] = None
    ) -> list[Dict[str, Any]]:
        """List up to ``max_keys`` objects in ``bucket``.

        Also records ``bucket`` as the active bucket.
        """
        if max_keys is None:
            max_keys = settings.list_max_keys
        logger.info("Listing bucket contents", bucket=bucket, max_keys=max_keys)
        self.active_bucket_name = bucket
        handle = self.locator.resolve_client_for_bucket(bucket)

        try:
            response = check_status(
                "list_objects_v2",
                handle.client.list_objects_v2(Bucket=bucket, MaxKeys=max_keys),
            )
        except RPC_FAULTS as e:
            raise rpc_failure("list_objects_v2", e) from e

        return response.get("Contents", [])

    def list_object_versions(
        self, bucket: str, key: str, max_keys: Optional[int] = None
    ) -> list[Dict[str, Any]]:
        """List the versions of exactly ``key`` in ``bucket``."""
        if max_keys is None:
            max_keys = settings.version_max_keys
        logger.info("Listing object versions", bucket=bucket, key=key)
        handle = self.locator.resolve_client_for_bucket(bucket)

        try:
            response = check_status(
                "list_object_versions",
                handle.client.list_object_versions(
                    Bucket=bucket, Prefix=key, MaxKeys=max_keys
                ),
            )
        except RPC_FAULTS as e:
            raise rpc_failure("list_object_versions", e) from e

        # Prefix also matches longer keys
        versions = [v for v in response.get("Versions", []) if v.get("Key") == key]
        logger.debug("Version listing completed", key=key, version_count=len(versions))
        return versions

    # Object operations
    def upload_file(self, bucket: str, key: str, file_path: str) -> bool:
        """Upload the local file at ``file_path`` as ``key``."""
        logger.info("Uploading file", bucket=bucket, key=key, file_path=file_path)
        source = Path(file_path)
        if not source.is_file():
            raise ValidationError(f"Local file not found: {file_path}")

        handle = self.locator.resolve_client_for_bucket(bucket)
        try:
            with source.open("rb") as body:
                response = handle.client.put_object(Bucket=bucket, Key=key, Body=body)
            check_status("put_object", response)
        except RPC_FAULTS as e:
            raise rpc_failure("put_object", e) from e
        return True

    def download_object(
        self,
        bucket: str,
        key: str,
        directory: str,
        version_id: Optional[str] = None,
    ) -> bool:
        """Download ``key`` to ``directory / key``, creating parent folders.

        The object is streamed to a temporary file beside the target and
        moved into place only once complete, so a failed transfer leaves any
        existing file untouched.

        Raises:
            ValidationError: If ``key`` would place the file outside
                ``directory``
            RpcFailureError: If the request or the transfer fails
        """
        logger.info("Downloading object", bucket=bucket, key=key, directory=directory)
        target = download_target(directory, key)
        handle = self.locator.resolve_client_for_bucket(bucket)

        params: Dict[str, Any] = {"Bucket": bucket, "Key": key}
        if version_id:
            params["VersionId"] = version_id

        try:
            response = check_status("get_object", handle.client.get_object(**params))
        except RPC_FAULTS as e:
            raise rpc_failure("get_object", e) from e

        body = response["Body"]
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, partial = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".part"
        )
        try:
            with os.fdopen(fd, "wb") as out:
                for chunk in body.iter_chunks():
                    out.write(chunk)
            os.replace(partial, target)
        except RPC_FAULTS as e:
            raise rpc_failure("get_object", e) from e
        finally:
            body.close()
            Path(partial).unlink(missing_ok=True)

        logger.info("Object downloaded", bucket=bucket, key=key, path=str(target))
        return True

    async def upload_file_async(self, bucket: str, key: str, file_path: str) -> bool:
        """Run ``upload_file`` in a worker thread."""
        return await asyncio.to_thread(self.upload_file, bucket, key, file_path)

    async def download_object_async(
        self,
        bucket: str,
        key: str,
        directory: str,
        version_id: Optional[str] = None,
    ) -> bool:
        """Run ``download_object`` in a worker thread."""
        return await asyncio.to_thread(
            self.download_object, bucket, key, directory, version_id
        )

    def delete_object(
        self, bucket: str, key: str, version_id: Optional[str] = None
    ) -> bool:
        """Delete ``key``, or one version of it when ``version_id`` is given."""
        logger.info("Deleting object", bucket=bucket, key=key, version_id=version_id)
        handle = self.locator.resolve_client_for_bucket(bucket)

        params: Dict[str, Any] = {"Bucket": bucket, "Key": key}
        if version_id:
            params["VersionId"] = version_id

        try:
            check_status("delete_object", handle.client.delete_object(**params))
        except RPC_FAULTS as e:
            raise rpc_failure("delete_object", e) from e
        return True

    def restore_object_version(
        self,
        bucket: str,
        key: str,
        version_id: Optional[str] = None,
        days: int = 1,
    ) -> bool:
        """Restore an archived object (or one version of it) for ``days`` days."""
        logger.info("Restoring object", bucket=bucket, key=key, version_id=version_id)
        handle = self.locator.resolve_client_for_bucket(bucket)

        params: Dict[str, Any] = {
            "Bucket": bucket,
            "Key": key,
            "RestoreRequest": {"Days": days},
        }
        if version_id:
            params["VersionId"] = version_id

        try:
            check_status("restore_object", handle.client.restore_object(**params))
        except RPC_FAULTS as e:
            raise rpc_failure("restore_object", e) from e
        return True
