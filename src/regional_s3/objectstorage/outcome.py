"""Tagged results for callers that want a yes/no answer.

Operations raise distinct exceptions. ``OperationOutcome.capture`` records
those exceptions as a tagged failure instead, and ``bool(outcome)`` gives the
plain success flag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from regional_s3.core import get_logger
from regional_s3.core.exceptions import (
    BucketNotFoundError,
    ClientCreationError,
    NoActiveClientError,
    RegionalS3Error,
    RegionNotProvisionedError,
    RpcFailureError,
    UnknownRegionCodeError,
    ValidationError,
)

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    bucket_not_found = "bucket_not_found"
    unknown_region_code = "unknown_region_code"
    client_creation = "client_creation"
    region_not_provisioned = "region_not_provisioned"
    no_active_client = "no_active_client"
    rpc_failure = "rpc_failure"
    validation = "validation"
    other = "other"


_KINDS: list[tuple[type[RegionalS3Error], ErrorKind]] = [
    (BucketNotFoundError, ErrorKind.bucket_not_found),
    (UnknownRegionCodeError, ErrorKind.unknown_region_code),
    (ClientCreationError, ErrorKind.client_creation),
    (RegionNotProvisionedError, ErrorKind.region_not_provisioned),
    (NoActiveClientError, ErrorKind.no_active_client),
    (RpcFailureError, ErrorKind.rpc_failure),
    (ValidationError, ErrorKind.validation),
]


def error_kind(error: RegionalS3Error) -> ErrorKind:
    for error_type, kind in _KINDS:
        if isinstance(error, error_type):
            return kind
    # Subclasses without a dedicated kind
    return ErrorKind.other


@dataclass(frozen=True)
class OperationOutcome:
    """Result of one operation: a value on success, an error otherwise."""

    value: Any = None
    error: Optional[RegionalS3Error] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not False

    @property
    def kind(self) -> Optional[ErrorKind]:
        return error_kind(self.error) if self.error is not None else None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def capture(
        cls, func: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> "OperationOutcome":
        """Run ``func`` and record a regional-s3 error as a failed outcome.

        Exceptions that are not RegionalS3Error propagate.
        """
        try:
            return cls(value=func(*args, **kwargs))
        except RegionalS3Error as e:
            kind = error_kind(e)
            logger.info("Operation failed", kind=kind.value, error=str(e))
            return cls(error=e)
