"""Session name command - show how a session name is sent to STS."""

import click

from aws_clients.lib.credentials import sanitize_session_name


@click.command("session-name")
@click.argument("name")
def session_name(name: str) -> None:
    """Print NAME as it will be sent to STS AssumeRole.

    \b
    Examples:
      aws-clients session-name "build job #42 (prod)"
    """
    click.echo(sanitize_session_name(name))
