"""Shared fixtures: scratch directories and a moto-backed bucket."""

import pytest

TEST_BUCKET = "test-bucket"
TEST_REGION = "us-east-1"


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory."""
    return tmp_path


@pytest.fixture
def aws_credentials(monkeypatch):
    """Set fake AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def s3_bucket(aws_credentials):
    """Create a moto-backed bucket and yield its s3:// URL prefix."""
    from moto import mock_aws
    import boto3

    with mock_aws():
        client = boto3.client("s3", region_name=TEST_REGION)
        client.create_bucket(Bucket=TEST_BUCKET)
        yield f"s3://testing:testing@{TEST_BUCKET}.s3.{TEST_REGION}.amazonaws.com"
