"""Result type for client runs.

ClientFactory.run_with never raises for operational failures; it returns
either Ok(value) or Err(ClientFailure). Handle it with pattern matching:

    match factory.run_with(ClientKind.S3, list_buckets):
        case Ok(buckets):
            ...
        case Err(failure):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case containing a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error case containing an error."""

    error: E


type Result[T, E] = Ok[T] | Err[E]


def is_ok(result: Result[T, E]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> bool:
    return isinstance(result, Err)


def map_ok(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply f to the value if Ok, otherwise return the Err unchanged."""
    match result:
        case Ok(value):
            return Ok(f(value))
        case Err() as e:
            return e


def map_err(result: Result[T, E], f: Callable[[E], U]) -> Result[T, U]:
    """Apply f to the error if Err, otherwise return the Ok unchanged."""
    match result:
        case Ok() as o:
            return o
        case Err(error):
            return Err(f(error))


def unwrap(result: Result[T, E]) -> T:
    """Extract the value from Ok, or raise ValueError if Err.

    When the error carries a ``cause`` (see ClientFailure) the ValueError is
    chained to it so the original traceback is not lost.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            cause = getattr(error, "cause", None)
            raise ValueError(f"Called unwrap on Err: {error}") from cause


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Extract the value from Ok, or return default if Err."""
    match result:
        case Ok(value):
            return value
        case Err():
            return default
