"""Credential resolution.

A CredentialResolver turns a CredentialSource into a Credential. Static
sources resolve to their own keys, DefaultChain resolves to None (let boto3
discover credentials), and AssumedRole calls STS AssumeRole with the
credentials of its base source.

The STS call is deferred until something actually reads the credential and
happens at most once per resolver. Its outcome, success or failure, is
cached for the resolver's lifetime. There is no refresh on expiry: build a
new resolver (or ClientFactory) to get fresh role credentials.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from botocore.credentials import Credentials, ReadOnlyCredentials
from botocore.exceptions import BotoCoreError, ClientError

from aws_clients.lib.aws import build_session, client_config
from aws_clients.lib.errors import CredentialResolutionError
from aws_clients.models import (
    AssumedRole,
    Credential,
    CredentialSource,
    DefaultChain,
    StaticKeys,
    StaticSessionKeys,
)

if TYPE_CHECKING:
    from mypy_boto3_sts import STSClient

logger = logging.getLogger(__name__)

UNSUPPORTED_SESSION_NAME_CHARS = re.compile(r"[^\w+=,.@-]", re.ASCII)
MAX_SESSION_NAME_LENGTH = 64

type StsClientFactory = Callable[[Credential | None, str], STSClient]


def sanitize_session_name(name: str) -> str:
    """Make ``name`` acceptable to STS as a RoleSessionName.

    Characters outside [A-Za-z0-9+=,.@_-] become '_' and the result is cut
    to 64 characters.
    """
    return UNSUPPORTED_SESSION_NAME_CHARS.sub("_", name)[:MAX_SESSION_NAME_LENGTH]


def to_botocore(credential: Credential | None) -> Credentials | None:
    if credential is None:
        return None
    return Credentials(
        credential.access_key_id,
        credential.secret_access_key,
        credential.session_token,
        method="explicit",
    )


def default_sts_client(credential: Credential | None, region: str) -> STSClient:
    """STS client signed with ``credential`` (None: default provider chain)."""
    session = build_session(to_botocore(credential), region)
    return session.client("sts", config=client_config())


def assume_role(
    sts: STSClient,
    role_arn: str,
    session_name: str,
    duration_seconds: int,
    external_id: str | None = None,
) -> Credential:
    """Exchange the STS client's credentials for temporary role credentials.

    ExternalId is only sent when non-empty.
    """
    request = {
        "RoleArn": role_arn,
        "RoleSessionName": sanitize_session_name(session_name),
        "DurationSeconds": duration_seconds,
    }
    if external_id:
        request["ExternalId"] = external_id

    logger.info(
        "Assuming role %s as session %s for %ss",
        role_arn,
        request["RoleSessionName"],
        duration_seconds,
    )
    try:
        response = sts.assume_role(**request)
    except (ClientError, BotoCoreError) as e:
        raise CredentialResolutionError(role_arn, str(e)) from e
    except Exception as e:
        raise CredentialResolutionError(role_arn, f"{type(e).__name__}: {e}") from e

    try:
        creds = response["Credentials"]
        credential = Credential(
            access_key_id=creds["AccessKeyId"],
            secret_access_key=creds["SecretAccessKey"],
            session_token=creds["SessionToken"],
        )
    except (KeyError, TypeError) as e:
        raise CredentialResolutionError(role_arn, f"Malformed AssumeRole response: {e!r}") from e

    if not (credential.access_key_id and credential.secret_access_key and credential.session_token):
        raise CredentialResolutionError(role_arn, "AssumeRole returned empty credentials")
    return credential


class CredentialResolver:
    """Resolves one CredentialSource, at most once.

    Creating a resolver never touches the network. The first resolve()
    does the work under a lock; concurrent first callers wait for it and
    share its result or its error. Later callers read the cached outcome
    without locking.
    """

    def __init__(
        self,
        source: CredentialSource,
        region: str,
        sts_client_factory: StsClientFactory | None = None,
    ) -> None:
        self._source = source
        self._region = str(region)
        self._sts_client_factory = sts_client_factory or default_sts_client
        self._lock = threading.Lock()
        self._resolved = False
        self._credential: Credential | None = None
        self._error: CredentialResolutionError | None = None
        self._deferred = DeferredCredentials(self) if isinstance(source, AssumedRole) else None

    @property
    def source(self) -> CredentialSource:
        return self._source

    @property
    def resolved(self) -> bool:
        return self._resolved

    def resolve(self) -> Credential | None:
        """Credential for the source, or None for the default provider chain.

        Raises CredentialResolutionError if the AssumeRole exchange failed,
        now or on an earlier call.
        """
        if not self._resolved:
            with self._lock:
                if not self._resolved:
                    try:
                        self._credential = self._resolve_source()
                    except CredentialResolutionError as e:
                        self._error = e
                    self._resolved = True
        if self._error is not None:
            # Fresh instance per raise; the cached one keeps its original traceback.
            raise CredentialResolutionError(
                self._error.role_arn, self._error.reason
            ) from self._error.__cause__
        return self._credential

    def botocore_credentials(self) -> Credentials | None:
        """Credentials object to hand to botocore.

        For AssumedRole this is a DeferredCredentials; nothing is resolved
        until botocore reads it to sign a request.
        """
        if self._deferred is not None:
            return self._deferred
        return to_botocore(self.resolve())

    def _resolve_source(self) -> Credential | None:
        match self._source:
            case DefaultChain():
                return None
            case StaticKeys(access_key_id, secret_access_key):
                return Credential(access_key_id, secret_access_key)
            case StaticSessionKeys(access_key_id, secret_access_key, session_token):
                return Credential(access_key_id, secret_access_key, session_token)
            case AssumedRole() as role:
                return self._exchange(role)

    def _exchange(self, role: AssumedRole) -> Credential:
        base = CredentialResolver(role.base, self._region, self._sts_client_factory).resolve()
        try:
            sts = self._sts_client_factory(base, self._region)
        except BotoCoreError as e:
            raise CredentialResolutionError(role.role_arn, str(e)) from e
        except Exception as e:
            raise CredentialResolutionError(role.role_arn, f"{type(e).__name__}: {e}") from e
        return assume_role(
            sts,
            role.role_arn,
            role.session_name,
            role.duration_seconds,
            role.external_id,
        )


class DeferredCredentials(Credentials):
    """botocore credentials backed by a resolver's cached AssumeRole result.

    botocore reads access_key/secret_key/token or calls
    get_frozen_credentials() when it signs a request; the first such read
    performs the exchange.
    """

    account_id = None

    def __init__(self, resolver: CredentialResolver) -> None:
        # Base __init__ would assign the key attributes, which are properties here.
        self._resolver = resolver
        self.method = "assume-role"

    @property
    def access_key(self) -> str:
        return self._credential().access_key_id

    @property
    def secret_key(self) -> str:
        return self._credential().secret_access_key

    @property
    def token(self) -> str | None:
        return self._credential().session_token

    def get_frozen_credentials(self) -> ReadOnlyCredentials:
        credential = self._credential()
        return ReadOnlyCredentials(
            credential.access_key_id,
            credential.secret_access_key,
            credential.session_token,
        )

    def _credential(self) -> Credential:
        credential = self._resolver.resolve()
        assert credential is not None, "AssumedRole always resolves to a credential"
        return credential
