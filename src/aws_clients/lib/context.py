"""Per-thread ambient session.

ClientFactory.run_with opens a scope before it builds anything, installs
its own boto3 Session as the calling thread's ambient session once the
session exists, and puts the previous one back when the scope closes.
Code running inside the callback can reach the session through
ambient_session() without it leaking to other threads or to later
unrelated work on a pooled thread.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import boto3

_local = threading.local()


def ambient_session() -> boto3.Session | None:
    """Session installed on this thread, or None outside any run."""
    return getattr(_local, "session", None)


def install_session(session: boto3.Session | None) -> None:
    """Replace this thread's ambient session inside the current scope."""
    _local.session = session


@contextmanager
def scoped_session(session: boto3.Session | None = None) -> Iterator[boto3.Session | None]:
    """Install ``session`` for this thread; restore the previous one on exit.

    With no argument the scope starts empty, so nothing built inside it
    sees the caller's session until install_session() is called.
    """
    previous = ambient_session()
    install_session(session)
    try:
        yield session
    finally:
        install_session(previous)
