"""Region-bound AWS client factory.

A ClientFactory holds one credential source and one region. run_with()
builds a client of the requested kind and runs caller logic against it:

    factory = ClientFactory.from_static_keys("AKIA...", "secret", "us-west-2")
    match factory.run_with(ClientKind.S3, lambda s3: s3.list_buckets()["Buckets"]):
        case Ok(buckets):
            ...
        case Err(failure):
            ...

Any exception raised while building the client or inside the callback comes
back as Err(ClientFailure). Nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Self, TypeVar

import boto3
from botocore.exceptions import ClientError

from aws_clients.lib.aws import build_session, client_config
from aws_clients.lib.context import install_session, scoped_session
from aws_clients.lib.credentials import CredentialResolver, StsClientFactory
from aws_clients.lib.errors import ClientFailure, CredentialResolutionError
from aws_clients.lib.regions import Region, parse_region
from aws_clients.lib.result import Err, Ok, Result
from aws_clients.models import (
    DEFAULT_SESSION_DURATION,
    AssumedRole,
    ClientKind,
    CredentialSource,
    DefaultChain,
    StaticKeys,
    StaticSessionKeys,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

type ClientRecipe = Callable[[boto3.Session], Any]


# =============================================================================
# Client Recipes
# =============================================================================


def _s3_client(session: boto3.Session) -> Any:
    return session.client("s3", config=client_config(s3={"addressing_style": "path"}))


def _service_client(kind: ClientKind) -> ClientRecipe:
    def create(session: boto3.Session) -> Any:
        return session.client(kind.value, config=client_config())

    return create


RECIPES: dict[ClientKind, ClientRecipe] = {
    ClientKind.S3: _s3_client,
    ClientKind.CODEDEPLOY: _service_client(ClientKind.CODEDEPLOY),
    ClientKind.CODEPIPELINE: _service_client(ClientKind.CODEPIPELINE),
    ClientKind.CODEBUILD: _service_client(ClientKind.CODEBUILD),
    ClientKind.STS: _service_client(ClientKind.STS),
}


# =============================================================================
# Factory
# =============================================================================


class ClientFactory:
    """Builds clients for one credential source in one region.

    The region is validated on construction (ConfigurationError). Credentials
    are resolved on first use and reused for every later call.
    """

    def __init__(
        self,
        source: CredentialSource,
        region: str,
        *,
        sts_client_factory: StsClientFactory | None = None,
    ) -> None:
        self._region: Region = parse_region(region)
        self._source = source
        self._resolver = CredentialResolver(source, self._region, sts_client_factory)

    @classmethod
    def from_source(cls, source: CredentialSource, region: str, **kwargs: Any) -> Self:
        return cls(source, region, **kwargs)

    @classmethod
    def from_default_chain(cls, region: str, **kwargs: Any) -> Self:
        return cls(DefaultChain(), region, **kwargs)

    @classmethod
    def from_static_keys(
        cls, access_key_id: str, secret_access_key: str, region: str, **kwargs: Any
    ) -> Self:
        return cls(StaticKeys(access_key_id, secret_access_key), region, **kwargs)

    @classmethod
    def from_session_keys(
        cls,
        access_key_id: str,
        secret_access_key: str,
        session_token: str,
        region: str,
        **kwargs: Any,
    ) -> Self:
        return cls(
            StaticSessionKeys(access_key_id, secret_access_key, session_token), region, **kwargs
        )

    @classmethod
    def from_assumed_role(
        cls,
        role_arn: str,
        session_name: str,
        duration_seconds: int = DEFAULT_SESSION_DURATION,
        region: str | None = None,
        *,
        external_id: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        session_token: str | None = None,
        **kwargs: Any,
    ) -> Self:
        """Assume ``role_arn`` using static keys if given, else the default chain.

        With ``session_token`` the keys are temporary session keys.
        """
        base: CredentialSource
        if session_token is not None:
            base = StaticSessionKeys(access_key_id or "", secret_access_key or "", session_token)
        elif access_key_id is not None or secret_access_key is not None:
            base = StaticKeys(access_key_id or "", secret_access_key or "")
        else:
            base = DefaultChain()
        source = AssumedRole(
            base=base,
            role_arn=role_arn,
            session_name=session_name,
            duration_seconds=duration_seconds,
            external_id=external_id,
        )
        return cls(source, region, **kwargs)

    @property
    def region(self) -> Region:
        return self._region

    @property
    def source(self) -> CredentialSource:
        return self._source

    def get_region(self) -> str:
        return self._region.value

    def run_with(self, kind: ClientKind, fn: Callable[[Any], T]) -> Result[T, ClientFailure]:
        """Build a ``kind`` client and return Ok(fn(client)).

        The isolation scope covers session construction, client construction
        and the callback; the factory's session is this thread's ambient
        session once built. Failures come back as Err(ClientFailure).
        """
        try:
            recipe = RECIPES[ClientKind(kind)]
            with scoped_session():
                session = build_session(self._resolver.botocore_credentials(), self._region)
                install_session(session)
                client = recipe(session)
                logger.debug("Built %s client in %s", kind, self._region)
                return Ok(fn(client))
        except Exception as e:
            logger.warning("%s call in %s failed: %s", kind, self._region, e)
            return Err(
                ClientFailure(
                    kind=str(kind),
                    region=self._region.value,
                    reason=_describe(e),
                    cause=e,
                )
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r}, region={self._region.value!r})"


def _describe(e: Exception) -> str:
    match e:
        case ClientError():
            error = e.response.get("Error", {})
            return f"{error.get('Code', 'Unknown')}: {error.get('Message', str(e))}"
        case CredentialResolutionError():
            return str(e)
        case _:
            return f"{type(e).__name__}: {e}"
