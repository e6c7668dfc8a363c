"""Tests for lib/params.py - parameter mapping to credential sources."""

import pytest

from aws_clients.lib import params as p
from aws_clients.lib.credentials import CredentialResolver
from aws_clients.lib.errors import ConfigurationError
from aws_clients.lib.factory import ClientFactory
from aws_clients.lib.regions import Region
from aws_clients.models import AssumedRole, DefaultChain, StaticKeys, StaticSessionKeys

ROLE_ARN = "arn:aws:iam::123456789012:role/deploy"


class TestRegion:
    def test_configured_region(self) -> None:
        assert p.region_from_params({p.REGION_NAME: "eu-west-2"}) is Region.EU_WEST_2

    def test_missing_region_defaults(self) -> None:
        assert p.region_from_params({}) is Region.US_EAST_1

    def test_unknown_region(self) -> None:
        with pytest.raises(ConfigurationError):
            p.region_from_params({p.REGION_NAME: "atlantis-1"})


class TestCredentialsType:
    def test_defaults_to_default_chain(self) -> None:
        assert p.credentials_type({}) is p.CredentialsType.DEFAULT_CHAIN

    def test_unknown_type(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown credentials type"):
            p.credentials_type({p.CREDENTIALS_TYPE: "magic"})


class TestSourceFromParams:
    def test_default_chain(self) -> None:
        assert p.source_from_params({p.CREDENTIALS_TYPE: "default-chain"}) == DefaultChain()

    def test_static_keys(self) -> None:
        source = p.source_from_params(
            {
                p.CREDENTIALS_TYPE: "static-keys",
                p.ACCESS_KEY_ID: "AKIAEXAMPLE",
                p.SECRET_ACCESS_KEY: "plain-secret",
            }
        )
        assert source == StaticKeys("AKIAEXAMPLE", "plain-secret")

    def test_secure_secret_preferred(self) -> None:
        source = p.source_from_params(
            {
                p.CREDENTIALS_TYPE: "static-keys",
                p.ACCESS_KEY_ID: "AKIAEXAMPLE",
                p.SECRET_ACCESS_KEY: "plain-secret",
                p.SECURE_SECRET_ACCESS_KEY: "secure-secret",
            }
        )
        assert source == StaticKeys("AKIAEXAMPLE", "secure-secret")

    def test_static_keys_missing_secret(self) -> None:
        with pytest.raises(ConfigurationError, match="secret_access_key"):
            p.source_from_params({p.CREDENTIALS_TYPE: "static-keys", p.ACCESS_KEY_ID: "AKIA"})

    def test_static_session_keys(self) -> None:
        source = p.source_from_params(
            {
                p.CREDENTIALS_TYPE: "static-session-keys",
                p.ACCESS_KEY_ID: "ASIATEMP",
                p.SECURE_SECRET_ACCESS_KEY: "secret",
                p.SESSION_TOKEN: "token",
            }
        )
        assert source == StaticSessionKeys("ASIATEMP", "secret", "token")

    def test_role_wraps_static_keys(self) -> None:
        source = p.source_from_params(
            {
                p.CREDENTIALS_TYPE: "static-keys",
                p.ACCESS_KEY_ID: "AKIAEXAMPLE",
                p.SECRET_ACCESS_KEY: "secret",
                p.IAM_ROLE_ARN: ROLE_ARN,
                p.SESSION_NAME: "nightly build",
                p.SESSION_DURATION: "1800",
                p.EXTERNAL_ID: "ext-1",
            }
        )
        assert isinstance(source, AssumedRole)
        assert source.base == StaticKeys("AKIAEXAMPLE", "secret")
        assert source.role_arn == ROLE_ARN
        assert source.session_name == "nightly build"
        assert source.duration_seconds == 1800
        assert source.external_id == "ext-1"

    def test_role_defaults(self) -> None:
        source = p.source_from_params({p.IAM_ROLE_ARN: ROLE_ARN})
        assert isinstance(source, AssumedRole)
        assert source.base == DefaultChain()
        assert source.session_name == "aws-clients"
        assert source.duration_seconds == 3600
        assert source.external_id is None

    def test_empty_external_id_preserved(self) -> None:
        source = p.source_from_params({p.IAM_ROLE_ARN: ROLE_ARN, p.EXTERNAL_ID: ""})
        assert isinstance(source, AssumedRole)
        assert source.external_id == ""

    def test_external_id_stripped(self) -> None:
        source = p.source_from_params({p.IAM_ROLE_ARN: ROLE_ARN, p.EXTERNAL_ID: "  ext-1 "})
        assert isinstance(source, AssumedRole)
        assert source.external_id == "ext-1"

    def test_blank_external_id_not_sent(self, sts, sts_factory) -> None:
        source = p.source_from_params({p.IAM_ROLE_ARN: ROLE_ARN, p.EXTERNAL_ID: "   "})
        assert isinstance(source, AssumedRole)
        assert source.external_id == ""

        CredentialResolver(source, "us-east-1", sts_factory).resolve()

        assert "ExternalId" not in sts.assume_role.call_args.kwargs

    def test_blank_role_arn_means_no_role(self) -> None:
        assert p.source_from_params({p.IAM_ROLE_ARN: "  "}) == DefaultChain()

    def test_invalid_duration(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid session duration"):
            p.source_from_params({p.IAM_ROLE_ARN: ROLE_ARN, p.SESSION_DURATION: "one hour"})


class TestFactoryFromParams:
    def test_builds_factory(self) -> None:
        factory = p.factory_from_params(
            {
                p.REGION_NAME: "us-west-2",
                p.CREDENTIALS_TYPE: "static-keys",
                p.ACCESS_KEY_ID: "AKIAEXAMPLE",
                p.SECRET_ACCESS_KEY: "secret",
            }
        )
        assert isinstance(factory, ClientFactory)
        assert factory.get_region() == "us-west-2"
        assert factory.source == StaticKeys("AKIAEXAMPLE", "secret")
