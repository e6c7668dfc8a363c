"""Shared CLI utilities.

Common options, ClientFactory creation, error handling, output formatting.
"""

import json
import sys
from collections.abc import Callable
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, ParamSpec, TypeVar

import click

from aws_clients.lib.errors import ClientFailure, ConfigurationError, CredentialResolutionError
from aws_clients.lib.factory import ClientFactory
from aws_clients.lib.regions import DEFAULT_REGION
from aws_clients.lib.result import Err, Ok, Result
from aws_clients.models import DEFAULT_SESSION_DURATION, DEFAULT_SESSION_NAME

# Type variables for decorators
P = ParamSpec("P")
T = TypeVar("T")


def region_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --region/-r option."""
    return click.option(
        "--region",
        "-r",
        default=DEFAULT_REGION.value,
        show_default=True,
        help="AWS region",
    )(fn)


def json_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --json flag for JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Output as JSON",
    )(fn)


def credential_options(fn: Callable[P, T]) -> Callable[P, T]:
    """Add region and credential options.

    Without keys or a role the default provider chain is used.
    """
    options = [
        click.option(
            "--session-duration",
            type=int,
            default=DEFAULT_SESSION_DURATION,
            show_default=True,
            help="Assumed role session duration in seconds (900-43200)",
        ),
        click.option(
            "--session-name",
            default=DEFAULT_SESSION_NAME,
            show_default=True,
            help="Assumed role session name",
        ),
        click.option("--external-id", default=None, help="External ID for --role-arn"),
        click.option("--role-arn", default=None, help="IAM role to assume"),
        click.option("--session-token", default=None, help="Session token"),
        click.option("--secret-access-key", default=None, help="Secret access key"),
        click.option("--access-key-id", default=None, help="Access key ID"),
        region_option,
    ]
    for option in options:
        fn = option(fn)
    return fn


def make_factory(
    region: str,
    access_key_id: str | None = None,
    secret_access_key: str | None = None,
    session_token: str | None = None,
    role_arn: str | None = None,
    external_id: str | None = None,
    session_name: str = DEFAULT_SESSION_NAME,
    session_duration: int = DEFAULT_SESSION_DURATION,
) -> ClientFactory:
    """Create a ClientFactory from CLI options, exiting on bad configuration."""
    try:
        if role_arn:
            return ClientFactory.from_assumed_role(
                role_arn,
                session_name,
                session_duration,
                region,
                external_id=external_id,
                access_key_id=access_key_id,
                secret_access_key=secret_access_key,
                session_token=session_token,
            )
        if session_token:
            return ClientFactory.from_session_keys(
                access_key_id or "", secret_access_key or "", session_token, region
            )
        if access_key_id or secret_access_key:
            return ClientFactory.from_static_keys(
                access_key_id or "", secret_access_key or "", region
            )
        return ClientFactory.from_default_chain(region)
    except ConfigurationError as e:
        handle_error(e)
        sys.exit(1)  # Should never reach here, but for type checker


def handle_result(result: Result[T, Any], success_message: str | None = None) -> T:
    """Handle a Result, exiting on error with appropriate message.

    On Ok: returns the value, optionally prints success message
    On Err: prints error and exits with code 1
    """
    match result:
        case Ok(value):
            if success_message:
                click.secho(success_message, fg="green", bold=True)
            return value
        case Err(error):
            handle_error(error)
            sys.exit(1)  # Should never reach here, but for type checker


def handle_error(error: Any) -> None:
    """Print error message and exit."""
    message = _format_error(error)
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _format_error(error: Any) -> str:
    """Format error for display."""
    match error:
        case ClientFailure(kind, region, reason, cause) if isinstance(
            cause, CredentialResolutionError
        ):
            return f"Could not obtain credentials for {kind} in {region}: {cause.reason}"

        case ClientFailure(kind, region, reason):
            return f"{kind} call in {region} failed: {reason}"

        case ConfigurationError():
            return f"Invalid configuration: {error}"

        case _:
            return str(error)


def to_json(obj: Any) -> str:
    """Convert object to JSON string."""
    return json.dumps(_to_serializable(obj), indent=2)


def _to_serializable(obj: Any) -> Any:
    """Convert object to JSON-serializable form."""
    if obj is None:
        return None
    if isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: _to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_serializable(v) for v in obj]
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_serializable(asdict(obj))
    return str(obj)


def echo_key_value(key: str, value: Any, indent: int = 0) -> None:
    """Print a key-value pair with optional indentation."""
    prefix = "  " * indent
    click.echo(f"{prefix}{key}: {value}")
