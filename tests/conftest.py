"""Shared pytest fixtures for aws-clients tests."""

from unittest.mock import MagicMock

import pytest
from moto import mock_aws

from aws_clients.models import StaticKeys

ROLE_ARN = "arn:aws:iam::123456789012:role/deploy"


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def mocked_aws(aws_credentials):
    """Run the test inside moto's mock_aws."""
    with mock_aws():
        yield


@pytest.fixture
def assume_role_response() -> dict:
    return {
        "Credentials": {
            "AccessKeyId": "ASIAROLEKEY",
            "SecretAccessKey": "role-secret",
            "SessionToken": "role-token",
            "Expiration": "2030-01-01T00:00:00Z",
        },
        "AssumedRoleUser": {
            "AssumedRoleId": "AROA123:deploy",
            "Arn": "arn:aws:sts::123456789012:assumed-role/deploy/aws-clients",
        },
    }


@pytest.fixture
def sts(assume_role_response) -> MagicMock:
    """Stand-in STS client recording AssumeRole calls."""
    client = MagicMock()
    client.assume_role.return_value = assume_role_response
    return client


@pytest.fixture
def sts_factory(sts) -> MagicMock:
    """StsClientFactory returning the ``sts`` mock regardless of base credential."""
    return MagicMock(return_value=sts)


@pytest.fixture
def static_keys() -> StaticKeys:
    return StaticKeys("AKIAEXAMPLE", "secret")
