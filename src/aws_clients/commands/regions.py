"""Regions command - list the supported AWS regions."""

import click

from aws_clients.commands.common import json_option, to_json
from aws_clients.lib.regions import DEFAULT_REGION, all_regions, describe_region


@click.command()
@json_option
def regions(as_json: bool) -> None:
    """List supported AWS regions.

    \b
    Examples:
      aws-clients regions
      aws-clients regions --json
    """
    if as_json:
        click.echo(
            to_json(
                [
                    {
                        "region": region,
                        "name": describe_region(region),
                        "default": region == DEFAULT_REGION,
                    }
                    for region in all_regions()
                ]
            )
        )
        return

    for region in all_regions():
        marker = " (default)" if region == DEFAULT_REGION else ""
        click.echo(f"{region.value:<16} {describe_region(region)}{marker}")
