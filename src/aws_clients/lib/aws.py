"""AWS session construction.

Every client is built from a boto3 Session bound to one region and one
botocore credentials object. Passing None for the credentials leaves the
session on boto3's default provider chain.
"""

from __future__ import annotations

from typing import Any

import boto3
import botocore.session
from botocore.config import Config
from botocore.credentials import CredentialProvider, Credentials
from botocore.credentials import CredentialResolver as ProviderChain

from aws_clients import __version__

USER_AGENT_EXTRA = f"aws-clients/{__version__}"


class _FixedCredentialProvider(CredentialProvider):
    """Hands botocore a credentials object without touching its fields.

    Reading the fields is what triggers a deferred AssumeRole, so the
    provider must not do it at load time.
    """

    METHOD = "aws-clients"

    def __init__(self, credentials: Credentials) -> None:
        super().__init__()
        self._credentials = credentials

    def load(self) -> Credentials:
        return self._credentials


def build_session(credentials: Credentials | None, region: str) -> boto3.Session:
    """Create a fresh boto3 Session for one region and one credential."""
    botocore_session = botocore.session.get_session()
    if credentials is not None:
        botocore_session.register_component(
            "credential_provider",
            ProviderChain([_FixedCredentialProvider(credentials)]),
        )
    return boto3.Session(botocore_session=botocore_session, region_name=str(region))


def client_config(**kwargs: Any) -> Config:
    """botocore Config carrying the package user agent."""
    return Config(user_agent_extra=USER_AGENT_EXTRA, **kwargs)
