"""aws-clients CLI entry point."""

import logging

import click

from . import __version__
from .commands import buckets, regions, session_name, whoami


@click.group()
@click.version_option(version=__version__, prog_name="aws-clients")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Resolve AWS credentials and run region-bound service clients."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(regions)
cli.add_command(session_name)
cli.add_command(whoami)
cli.add_command(buckets)


if __name__ == "__main__":
    cli()
