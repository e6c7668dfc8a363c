"""Identity commands - check which credentials a configuration resolves to."""

from typing import Any

import click

from aws_clients.commands.common import (
    credential_options,
    echo_key_value,
    handle_result,
    json_option,
    make_factory,
    to_json,
)
from aws_clients.lib.result import map_ok
from aws_clients.models import ClientKind


def _caller_identity(sts: Any) -> dict[str, str]:
    response = sts.get_caller_identity()
    return {
        "account": response["Account"],
        "arn": response["Arn"],
        "user_id": response["UserId"],
    }


def _bucket_names(response: dict[str, Any]) -> list[str]:
    return [bucket["Name"] for bucket in response.get("Buckets", [])]


@click.command()
@credential_options
@json_option
def whoami(as_json: bool, **options: Any) -> None:
    """Show the identity the configured credentials resolve to.

    \b
    Examples:
      aws-clients whoami
      aws-clients whoami --role-arn arn:aws:iam::123456789012:role/deploy
      aws-clients whoami --access-key-id AKIA... --secret-access-key ... --json
    """
    factory = make_factory(**options)
    identity = handle_result(factory.run_with(ClientKind.STS, _caller_identity))

    if as_json:
        click.echo(to_json({"region": factory.get_region(), **identity}))
        return

    echo_key_value("Account", identity["account"])
    echo_key_value("ARN", identity["arn"])
    echo_key_value("User ID", identity["user_id"])
    echo_key_value("Region", factory.get_region())


@click.command()
@credential_options
@json_option
def buckets(as_json: bool, **options: Any) -> None:
    """List S3 buckets visible to the configured credentials.

    \b
    Examples:
      aws-clients buckets --region us-west-2
    """
    factory = make_factory(**options)
    listing = factory.run_with(ClientKind.S3, lambda s3: s3.list_buckets())
    names = handle_result(map_ok(listing, _bucket_names))

    if as_json:
        click.echo(to_json(names))
        return

    if not names:
        click.echo("(none)")
    for name in names:
        click.echo(name)
