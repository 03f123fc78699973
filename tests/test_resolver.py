"""Tests for bucket to region resolution."""

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from regional_s3.core.exceptions import (
    BucketNotFoundError,
    RpcFailureError,
    UnknownRegionCodeError,
)
from regional_s3.objectstorage.regions import Region
from regional_s3.objectstorage.resolver import RegionResolver


def client_error(code: str, status: int, operation: str = "HeadBucket") -> ClientError:
    return ClientError(
        {
            "Error": {"Code": code, "Message": "error"},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )


class TestRegionResolver:
    """Test RegionResolver with mocked clients."""

    def setup_method(self):
        self.resolver = RegionResolver()

    def test_location_of_existing_bucket(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.get_bucket_location.return_value = {
            "LocationConstraint": "eu-west-1"
        }

        assert self.resolver.location_of(handle, "logs-eu") == Region("eu-west-1")
        handle.client.head_bucket.assert_called_once_with(Bucket="logs-eu")
        handle.client.get_bucket_location.assert_called_once_with(Bucket="logs-eu")

    def test_location_of_legacy_eu_bucket(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.get_bucket_location.return_value = {"LocationConstraint": "EU"}

        assert self.resolver.location_of(handle, "old-bucket") == Region("eu-west-1")

    def test_location_of_us_east_1_bucket(self, make_handle):
        handle = make_handle("eu-west-1")
        handle.client.get_bucket_location.return_value = {"LocationConstraint": None}

        assert self.resolver.location_of(handle, "data") == Region("us-east-1")

    def test_missing_bucket_skips_location_query(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.head_bucket.side_effect = client_error("404", 404)

        with pytest.raises(BucketNotFoundError) as exc_info:
            self.resolver.location_of(handle, "missing-bucket")

        assert exc_info.value.bucket == "missing-bucket"
        handle.client.get_bucket_location.assert_not_called()

    def test_forbidden_bucket_counts_as_existing(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.head_bucket.side_effect = client_error("403", 403)

        assert self.resolver.bucket_exists(handle, "someone-elses") is True

    def test_other_head_failures_raise_rpc_failure(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.head_bucket.side_effect = client_error("500", 500)

        with pytest.raises(RpcFailureError) as exc_info:
            self.resolver.bucket_exists(handle, "bucket")

        assert exc_info.value.operation == "head_bucket"
        assert exc_info.value.status_code == 500

    def test_transport_failure_raises_rpc_failure(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.get_bucket_location.side_effect = EndpointConnectionError(
            endpoint_url="https://s3.amazonaws.com"
        )

        with pytest.raises(RpcFailureError):
            self.resolver.query_location(handle, "bucket")

    def test_unknown_location_code(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.get_bucket_location.return_value = {
            "LocationConstraint": "moon-base-1"
        }

        with pytest.raises(UnknownRegionCodeError):
            self.resolver.location_of(handle, "bucket")

    def test_locations_are_not_cached(self, make_handle):
        handle = make_handle("us-east-1")
        handle.client.get_bucket_location.return_value = {"LocationConstraint": None}

        self.resolver.location_of(handle, "data")
        self.resolver.location_of(handle, "data")

        assert handle.client.get_bucket_location.call_count == 2

    def test_translate_location_code_on_resolver(self):
        assert RegionResolver.translate_location_code("EU") == Region("eu-west-1")
