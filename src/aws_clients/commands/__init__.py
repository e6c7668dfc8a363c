"""Commands layer - CLI facade over the client factory."""

from aws_clients.commands.identity import buckets, whoami
from aws_clients.commands.regions import regions
from aws_clients.commands.session import session_name

__all__ = [
    "regions",
    "session_name",
    "whoami",
    "buckets",
]
