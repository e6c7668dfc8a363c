"""Credential and client data models.

Pure data structures. A CredentialSource describes *how* to obtain a
credential; resolving it is the job of lib.credentials.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self

from aws_clients.lib.errors import ConfigurationError

MIN_SESSION_DURATION = 900
MAX_SESSION_DURATION = 43200
DEFAULT_SESSION_DURATION = 3600
DEFAULT_SESSION_NAME = "aws-clients"


class Arn(str):
    """AWS ARN - a string subclass with parsed component access."""

    def __new__(cls, value: str) -> Self:
        parts = value.split(":")
        if len(parts) < 6 or parts[0] != "arn":
            raise ValueError(f"Invalid ARN: {value}")
        return super().__new__(cls, value)

    @property
    def service(self) -> str:
        return self.split(":")[2]

    @property
    def resource(self) -> str:
        return ":".join(self.split(":")[5:])

    @property
    def is_role(self) -> bool:
        return self.service == "iam" and self.resource.startswith("role/")


class ClientKind(StrEnum):
    """Service clients the factory knows how to build.

    Values are boto3 service names.
    """

    S3 = "s3"
    CODEDEPLOY = "codedeploy"
    CODEPIPELINE = "codepipeline"
    CODEBUILD = "codebuild"
    STS = "sts"


def _require(value: str | None, name: str) -> None:
    if value is None or not value.strip():
        raise ConfigurationError(f"Missing required credential field: {name}")


@dataclass(frozen=True)
class Credential:
    """Resolved access key pair, plus a session token for temporary keys."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)


# =============================================================================
# Credential Sources
# =============================================================================


@dataclass(frozen=True)
class DefaultChain:
    """Defer to boto3's default provider chain (env, config files, IMDS...)."""


@dataclass(frozen=True)
class StaticKeys:
    """Long-lived access keys."""

    access_key_id: str
    secret_access_key: str = field(repr=False)

    def __post_init__(self) -> None:
        _require(self.access_key_id, "access_key_id")
        _require(self.secret_access_key, "secret_access_key")


@dataclass(frozen=True)
class StaticSessionKeys:
    """Temporary keys obtained elsewhere."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str = field(repr=False)

    def __post_init__(self) -> None:
        _require(self.access_key_id, "access_key_id")
        _require(self.secret_access_key, "secret_access_key")
        _require(self.session_token, "session_token")


@dataclass(frozen=True)
class AssumedRole:
    """Role credentials obtained from STS using the credentials of ``base``.

    ``external_id`` of None and of "" are kept apart here, but neither is sent
    to STS.
    """

    base: CredentialSource
    role_arn: Arn
    session_name: str = DEFAULT_SESSION_NAME
    duration_seconds: int = DEFAULT_SESSION_DURATION
    external_id: str | None = None

    def __post_init__(self) -> None:
        _require(self.role_arn, "role_arn")
        try:
            arn = Arn(self.role_arn)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        if not arn.is_role:
            raise ConfigurationError(f"Not an IAM role ARN: {self.role_arn}")
        object.__setattr__(self, "role_arn", arn)

        _require(self.session_name, "session_name")
        if not MIN_SESSION_DURATION <= self.duration_seconds <= MAX_SESSION_DURATION:
            raise ConfigurationError(
                f"Session duration must be between {MIN_SESSION_DURATION} and "
                f"{MAX_SESSION_DURATION} seconds, got {self.duration_seconds}"
            )


type CredentialSource = DefaultChain | StaticKeys | StaticSessionKeys | AssumedRole
