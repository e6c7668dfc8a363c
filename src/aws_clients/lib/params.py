"""Read client settings from a flat parameter mapping.

The mapping is what a settings form or build configuration stores, already
migrated to the current key names. Only the keys below are read.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from aws_clients.lib.errors import ConfigurationError
from aws_clients.lib.factory import ClientFactory
from aws_clients.lib.regions import Region, parse_region
from aws_clients.models import (
    DEFAULT_SESSION_DURATION,
    DEFAULT_SESSION_NAME,
    AssumedRole,
    CredentialSource,
    DefaultChain,
    StaticKeys,
    StaticSessionKeys,
)

REGION_NAME = "aws.region.name"
CREDENTIALS_TYPE = "aws.credentials.type"
ACCESS_KEY_ID = "aws.access.key.id"
SECRET_ACCESS_KEY = "aws.secret.access.key"
SECURE_SECRET_ACCESS_KEY = "secure:aws.secret.access.key"
SESSION_TOKEN = "aws.session.token"
IAM_ROLE_ARN = "aws.iam.role.arn"
EXTERNAL_ID = "aws.external.id"
SESSION_NAME = "aws.session.name"
SESSION_DURATION = "aws.session.duration"


class CredentialsType(StrEnum):
    DEFAULT_CHAIN = "default-chain"
    STATIC_KEYS = "static-keys"
    STATIC_SESSION_KEYS = "static-session-keys"


def _get(params: Mapping[str, str], key: str) -> str | None:
    value = params.get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def _secret_key(params: Mapping[str, str]) -> str | None:
    return _get(params, SECURE_SECRET_ACCESS_KEY) or _get(params, SECRET_ACCESS_KEY)


def _duration(params: Mapping[str, str]) -> int:
    raw = _get(params, SESSION_DURATION)
    if raw is None:
        return DEFAULT_SESSION_DURATION
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid session duration: {raw!r}") from None


def credentials_type(params: Mapping[str, str]) -> CredentialsType:
    raw = _get(params, CREDENTIALS_TYPE)
    if raw is None:
        return CredentialsType.DEFAULT_CHAIN
    try:
        return CredentialsType(raw)
    except ValueError:
        raise ConfigurationError(f"Unknown credentials type: {raw!r}") from None


def region_from_params(params: Mapping[str, str]) -> Region:
    return parse_region(params.get(REGION_NAME))


def source_from_params(params: Mapping[str, str]) -> CredentialSource:
    """Build the credential source described by ``params``.

    A role ARN wraps whichever base credentials are selected.
    """
    base: CredentialSource
    match credentials_type(params):
        case CredentialsType.DEFAULT_CHAIN:
            base = DefaultChain()
        case CredentialsType.STATIC_KEYS:
            base = StaticKeys(_get(params, ACCESS_KEY_ID) or "", _secret_key(params) or "")
        case CredentialsType.STATIC_SESSION_KEYS:
            base = StaticSessionKeys(
                _get(params, ACCESS_KEY_ID) or "",
                _secret_key(params) or "",
                _get(params, SESSION_TOKEN) or "",
            )

    role_arn = _get(params, IAM_ROLE_ARN)
    if role_arn is None:
        return base

    # None and "" stay distinct here; neither reaches STS
    external_id = params.get(EXTERNAL_ID)
    if external_id is not None:
        external_id = external_id.strip()

    return AssumedRole(
        base=base,
        role_arn=role_arn,
        session_name=_get(params, SESSION_NAME) or DEFAULT_SESSION_NAME,
        duration_seconds=_duration(params),
        external_id=external_id,
    )


def factory_from_params(params: Mapping[str, str], **kwargs: Any) -> ClientFactory:
    return ClientFactory(source_from_params(params), region_from_params(params), **kwargs)
