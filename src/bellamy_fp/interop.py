"""
Conversions between bellamy_fp containers and ``returns`` containers.

Code elsewhere in the stack produces ``returns.result.Result`` (for example
through ``@safe``); these helpers let both sides meet without unwrapping by
hand. Variants map one to one and payloads are passed through untouched.
"""

from returns.maybe import Maybe
from returns.maybe import Nothing as ReturnsNothing
from returns.maybe import Some as ReturnsSome
from returns.result import Failure as ReturnsFailure
from returns.result import Result as ReturnsResult
from returns.result import Success as ReturnsSuccess

from .option import Option, Some, none
from .result import Failure, Result, Success


def to_maybe[T](option: Option[T]) -> Maybe[T]:
    """``Some(v)`` becomes ``returns.maybe.Some(v)``, ``Nothing`` becomes ``returns.maybe.Nothing``."""
    if isinstance(option, Some):
        return ReturnsSome(option.value)
    return ReturnsNothing


def from_maybe[T](maybe: Maybe[T]) -> Option[T]:
    if isinstance(maybe, ReturnsSome):
        return Some(maybe.unwrap())
    return none


def to_returns[T, E](result: Result[T, E]) -> ReturnsResult[T, E]:
    if isinstance(result, Success):
        return ReturnsSuccess(result.value)
    return ReturnsFailure(result.error)


def from_returns[T, E](result: ReturnsResult[T, E]) -> Result[T, E]:
    """Convert a ``returns`` result, e.g. one produced by ``@safe``."""
    if isinstance(result, ReturnsSuccess):
        return Success(result.unwrap())
    return Failure(result.failure())


__all__ = ["from_maybe", "from_returns", "to_maybe", "to_returns"]
