"""Tests for the regional S3 session and its region management."""

import boto3
import pytest
from moto import mock_aws

from regional_s3.core.exceptions import (
    BucketNotFoundError,
    ClientCreationError,
    RegionNotProvisionedError,
    UnknownRegionCodeError,
)
from regional_s3.objectstorage.outcome import ErrorKind
from regional_s3.objectstorage.regions import Region
from regional_s3.objectstorage.session import RegionalS3Session


@pytest.fixture
def s3():
    """Mocked S3 with one bucket in us-east-1 and one in eu-west-1."""
    with mock_aws():
        boto3.client("s3", region_name="us-east-1").create_bucket(Bucket="data-us")
        boto3.client("s3", region_name="eu-west-1").create_bucket(
            Bucket="logs-eu",
            CreateBucketConfiguration={"LocationConstraint": "eu-west-1"},
        )
        yield


@pytest.fixture
def session(s3):
    return RegionalS3Session.from_credentials("test_key", "test_secret", "us-east-1")


class TestSessionConstruction:
    """Test the two construction paths."""

    def test_from_credentials_provisions_initial_region(self, session):
        assert session.regions == [Region("us-east-1")]
        assert session.active_region == Region("us-east-1")
        assert session.profile is None

    def test_from_profile(self, s3, credentials_file):
        session = RegionalS3Session.from_profile("analytics", "eu-west-1")

        assert session.profile == "analytics"
        assert session.active_client.profile == "analytics"
        assert session.active_region == Region("eu-west-1")

    def test_unknown_profile(self, s3):
        with pytest.raises(ClientCreationError):
            RegionalS3Session.from_profile("missing-profile", "us-east-1")

    def test_unknown_initial_region(self, s3):
        with pytest.raises(UnknownRegionCodeError):
            RegionalS3Session.from_credentials("k", "s", "nowhere-1")

    def test_sessions_are_independent(self, s3):
        first = RegionalS3Session.from_credentials("k", "s", "us-east-1")
        second = RegionalS3Session.from_credentials("k", "s", "us-east-1")

        first.client_for_bucket("logs-eu")

        assert len(first.regions) == 2
        assert second.regions == [Region("us-east-1")]


class TestRegionManagement:
    """Test bucket resolution and explicit region switching."""

    def test_bucket_in_new_region_is_provisioned(self, session):
        handle = session.client_for_bucket("logs-eu")

        assert handle.region == Region("eu-west-1")
        assert session.regions == [Region("us-east-1"), Region("eu-west-1")]
        assert session.active_client is handle

    def test_repeated_resolution_is_stable(self, session):
        assert session.client_for_bucket("logs-eu") is session.client_for_bucket(
            "logs-eu"
        )
        assert len(session.regions) == 2

    def test_missing_bucket_leaves_pool_unchanged(self, session):
        with pytest.raises(BucketNotFoundError):
            session.client_for_bucket("missing-bucket")

        assert session.regions == [Region("us-east-1")]
        assert session.active_region == Region("us-east-1")

    def test_change_region_to_unprovisioned_region(self, session):
        with pytest.raises(RegionNotProvisionedError):
            session.change_region("ap-south-1")

        assert session.active_region == Region("us-east-1")
        assert len(session.regions) == 1

    def test_add_new_region_then_change(self, session):
        added = session.add_new_region("ap-south-1")

        assert session.active_region == Region("us-east-1")
        assert session.change_region("ap-south-1") is added
        assert session.active_region == Region("ap-south-1")

    def test_add_existing_region_is_a_no_op(self, session):
        first = session.add_new_region("eu-west-1")
        second = session.add_new_region(Region("eu-west-1"))

        assert first is second
        assert len(session.regions) == 2

    def test_explicit_credentials_provision_other_regions(self, session):
        handle = session.client_for_bucket("logs-eu")
        credentials = handle.client._request_signer._credentials
        assert credentials.access_key == "test_key"

    def test_list_profiles(self, session, credentials_file):
        assert session.list_profiles() == ["analytics"]


class TestOutcomeProjection:
    """Test the yes/no projection over session operations."""

    def test_succeeded_true(self, session):
        assert session.succeeded(session.list_bucket_contents, "logs-eu") is True

    def test_succeeded_false_for_missing_bucket(self, session):
        assert session.succeeded(session.list_bucket_contents, "missing") is False

    def test_outcome_keeps_error_kind(self, session):
        outcome = session.outcome(session.change_region, "ap-south-1")

        assert not outcome
        assert outcome.kind is ErrorKind.region_not_provisioned
        assert isinstance(outcome.error, RegionNotProvisionedError)
