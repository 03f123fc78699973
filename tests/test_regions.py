"""Tests for region codes and location-code translation."""

import pytest

from regional_s3.core.exceptions import UnknownRegionCodeError
from regional_s3.objectstorage.regions import (
    Region,
    as_region,
    known_region_codes,
    translate_location_code,
)


class TestRegion:
    """Test the Region value type."""

    def test_equality_by_code(self):
        assert Region("eu-west-1") == Region("eu-west-1")
        assert Region("eu-west-1") != Region("eu-west-2")
        assert hash(Region("us-east-1")) == hash(Region("us-east-1"))

    def test_str_is_code(self):
        assert str(Region("ap-south-1")) == "ap-south-1"

    def test_parse_known_code(self):
        assert Region.parse("eu-central-1") == Region("eu-central-1")

    def test_parse_normalizes_case_and_whitespace(self):
        assert Region.parse(" US-WEST-2 ") == Region("us-west-2")

    def test_parse_unknown_code(self):
        with pytest.raises(UnknownRegionCodeError) as exc_info:
            Region.parse("mars-north-1")
        assert exc_info.value.code == "mars-north-1"

    def test_as_region_accepts_both_forms(self):
        region = Region("eu-west-1")
        assert as_region(region) is region
        assert as_region("eu-west-1") == region

    def test_known_codes_cover_common_regions(self):
        codes = known_region_codes()
        for code in ("us-east-1", "us-west-2", "eu-west-1", "ap-south-1"):
            assert code in codes


class TestTranslateLocationCode:
    """Test GetBucketLocation code translation."""

    def test_legacy_eu_code_maps_to_eu_west_1(self):
        assert translate_location_code("EU") == Region("eu-west-1")

    def test_legacy_eu_code_ignores_other_eu_regions(self):
        # Other EU regions translate to themselves, never to the legacy target
        assert translate_location_code("eu-central-1") == Region("eu-central-1")
        assert translate_location_code("eu-west-2") == Region("eu-west-2")
        assert translate_location_code("EU") == Region("eu-west-1")

    @pytest.mark.parametrize("code", [None, ""])
    def test_empty_location_is_us_east_1(self, code):
        assert translate_location_code(code) == Region("us-east-1")

    def test_canonical_code(self):
        assert translate_location_code("ap-southeast-2") == Region("ap-southeast-2")

    def test_unknown_code(self):
        with pytest.raises(UnknownRegionCodeError):
            translate_location_code("XX-UNKNOWN")
