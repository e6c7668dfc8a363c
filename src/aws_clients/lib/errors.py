"""Error types for aws-clients.

Invalid input is rejected with an exception at construction time.
Failures while building or using a client are frozen dataclasses returned
inside Err - pattern match on them in the CLI layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# =============================================================================
# Construction Errors
# =============================================================================


class ConfigurationError(ValueError):
    """Unknown region, or a credential source missing a required field."""


# =============================================================================
# Credential Errors
# =============================================================================


class CredentialResolutionError(Exception):
    """STS AssumeRole failed or returned unusable data.

    Raised to the first reader of a deferred credential and re-raised,
    unchanged, to every later reader of the same resolver.
    """

    def __init__(self, role_arn: str, reason: str) -> None:
        super().__init__(f"Failed to assume role '{role_arn}': {reason}")
        self.role_arn = role_arn
        self.reason = reason


# =============================================================================
# Client Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class ClientFailure:
    """Building a client or running caller logic against it failed.

    The only error kind returned by ClientFactory.run_with. The original
    exception is kept in ``cause`` for diagnostics.
    """

    kind: str
    region: str
    reason: str
    cause: BaseException | None = field(default=None, compare=False, repr=False)
