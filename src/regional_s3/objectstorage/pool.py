"""Pool of regional S3 client handles with one active handle."""

from typing import Iterator, Optional

from regional_s3.core import get_logger
from regional_s3.core.exceptions import NoActiveClientError
from regional_s3.objectstorage.clients import ClientHandle
from regional_s3.objectstorage.regions import Region

logger = get_logger(__name__)


class ClientPool:
    """Ordered collection of client handles, at most one per region.

    Entries are never removed. The active handle is always a pool member once
    the first handle has been inserted. Not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._handles: list[ClientHandle] = []
        self._active: Optional[ClientHandle] = None

    def lookup(self, region: Region) -> Optional[ClientHandle]:
        """Return the handle serving ``region``, or None if there is none."""
        logger.debug("Looking up client for region", region=region.code)
        for handle in self._handles:
            if handle.region == region:
                return handle
        logger.debug("No client for region", region=region.code)
        return None

    def insert(self, handle: ClientHandle) -> None:
        """Append a handle to the pool.

        Precondition: the caller has checked with ``lookup`` that no handle for
        ``handle.region`` exists. This is not re-checked here.
        """
        self._handles.append(handle)
        logger.debug(
            "Client added to pool", region=handle.region.code, size=len(self._handles)
        )

    def set_active(self, handle: ClientHandle) -> None:
        """Make ``handle`` the active handle; it must already be in the pool."""
        self._active = handle
        logger.debug("Active client changed", region=handle.region.code)

    def get_active(self) -> ClientHandle:
        """Return the active handle.

        Raises:
            NoActiveClientError: If no handle has been activated yet
        """
        if self._active is None:
            raise NoActiveClientError()
        return self._active

    @property
    def active(self) -> ClientHandle:
        return self.get_active()

    @property
    def regions(self) -> list[Region]:
        return [handle.region for handle in self._handles]

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[ClientHandle]:
        return iter(list(self._handles))

    def __contains__(self, region: object) -> bool:
        return isinstance(region, Region) and self.lookup(region) is not None
