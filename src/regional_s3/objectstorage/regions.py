"""Canonical S3 region identifiers.

Region codes are validated against the S3 endpoint data bundled with botocore,
across every partition it knows about (aws, aws-cn, aws-us-gov, ...). No
network access is needed to build the table.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

import boto3

from regional_s3.core import get_logger
from regional_s3.core.exceptions import UnknownRegionCodeError

logger = get_logger(__name__)

# S3 reports buckets in us-east-1 with an empty LocationConstraint
US_EAST_1 = "us-east-1"

# Legacy location code used by the oldest EU buckets
LEGACY_EU_CODE = "EU"
LEGACY_EU_REGION = "eu-west-1"


@lru_cache(maxsize=1)
def known_region_codes() -> frozenset[str]:
    """Return every S3 region code botocore has endpoint data for."""
    session = boto3.session.Session()
    codes: set[str] = set()
    for partition in session.get_available_partitions():
        codes.update(session.get_available_regions("s3", partition_name=partition))
    codes.add(US_EAST_1)
    logger.debug("Loaded S3 region table", region_count=len(codes))
    return frozenset(codes)


@dataclass(frozen=True)
class Region:
    """A canonical S3 region, compared by code."""

    code: str

    def __str__(self) -> str:
        return self.code

    @classmethod
    def parse(cls, code: str) -> "Region":
        """Build a Region from a canonical code such as ``eu-west-1``.

        Raises:
            UnknownRegionCodeError: If the code is not a known S3 region
        """
        normalized = code.strip().lower() if code else ""
        if normalized not in known_region_codes():
            raise UnknownRegionCodeError(code)
        return cls(normalized)


RegionLike = Union[Region, str]


def as_region(region: RegionLike) -> Region:
    """Accept either a Region or a region code string."""
    if isinstance(region, Region):
        return region
    return Region.parse(region)


def translate_location_code(code: Optional[str]) -> Region:
    """Map a GetBucketLocation ``LocationConstraint`` to a canonical Region.

    ``EU`` always maps to eu-west-1. This is a fixed compatibility mapping for
    the legacy code and is not applied to any other EU region. An empty
    constraint is how S3 reports us-east-1.

    Raises:
        UnknownRegionCodeError: If the code has no canonical region
    """
    if code is None or code == "":
        return Region(US_EAST_1)
    if code == LEGACY_EU_CODE:
        logger.debug("Translating legacy EU location code", region=LEGACY_EU_REGION)
        return Region(LEGACY_EU_REGION)
    return Region.parse(code)
