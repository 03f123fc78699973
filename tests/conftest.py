"""Test configuration and fixtures for regional-s3."""

from unittest.mock import MagicMock

import pytest

from regional_s3.objectstorage.clients import ClientHandle
from regional_s3.objectstorage.regions import Region


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch, tmp_path):
    """Point boto3 at fake credentials and empty config files."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_DEFAULT_PROFILE", raising=False)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "no-credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "no-config"))


@pytest.fixture
def credentials_file(monkeypatch, tmp_path):
    """Create a shared credentials file holding an 'analytics' profile."""
    path = tmp_path / "credentials"
    path.write_text(
        "[analytics]\n"
        "aws_access_key_id = analytics_key\n"
        "aws_secret_access_key = analytics_secret\n"
    )
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(path))
    return path


@pytest.fixture
def make_handle():
    """Build client handles around mock boto3 clients."""

    def _make(code: str, profile=None) -> ClientHandle:
        return ClientHandle(region=Region(code), profile=profile, client=MagicMock())

    return _make
