"""
Defines the ``Result`` Algebraic Data Type for robust and type-safe error handling.

A ``Result`` is a sum type representing either a success (``Success``) or a
failure (``Failure``). Using ``Result`` makes potential failures an explicit
part of a function's signature instead of raising, so every outcome has to be
handled at the type level.

Combinators are curried and take the result last. ``flat_map`` chains stop at
the first failure and never run the remaining steps. ``try_catch`` and
``try_catch_async`` are the bridge from code that raises.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, NoReturn, TypeGuard, final

from .exceptions import UnwrapError
from .pipe import identity

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class Success[T]:
    """Represents a successful outcome containing a value."""

    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    def map[U](self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[Any], Any]) -> "Success[T]":
        return self

    def flat_map[U, E](self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return fn(self.value)

    def fold[R](self, on_success: Callable[[T], R], on_failure: Callable[[Any], R]) -> R:
        return on_success(self.value)

    def get_or_else(self, default: T) -> T:
        return self.value

    def get_or_else_lazy(self, on_failure: Callable[[Any], T]) -> T:
        return self.value

    def get_or_else_throw(self, make_error: Callable[[Any], BaseException] | None = None) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Failure[E]:
    """Represents a failure outcome containing an error."""

    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"

    def map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def map_error[F](self, fn: Callable[[E], F]) -> "Failure[F]":
        return Failure(fn(self.error))

    def flat_map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def fold[R](self, on_success: Callable[[Any], R], on_failure: Callable[[E], R]) -> R:
        return on_failure(self.error)

    def get_or_else[T](self, default: T) -> T:
        return default

    def get_or_else_lazy[T](self, on_failure: Callable[[E], T]) -> T:
        return on_failure(self.error)

    def get_or_else_throw(self, make_error: Callable[[E], BaseException] | None = None) -> NoReturn:
        if make_error is not None:
            error = make_error(self.error)
        else:
            error = UnwrapError(f"Failure value: {self.error}", self.error)
        logger.debug("Raising %s for a failed result", type(error).__name__)
        raise error


# The Result type is a union of Success and Failure, representing either success or failure.
type Result[T, E] = Success[T] | Failure[E]


# --- Constructors ---


def success[T](value: T) -> Success[T]:
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    return Failure(error)


# --- Type Guards ---


def is_success[T, E](result: Result[T, E]) -> TypeGuard[Success[T]]:
    return isinstance(result, Success)


def is_failure[T, E](result: Result[T, E]) -> TypeGuard[Failure[E]]:
    return isinstance(result, Failure)


# --- Functor / Applicative / Monad ---


def map[T, U, E](fn: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:
    def _map(result: Result[T, E]) -> Result[U, E]:
        return Success(fn(result.value)) if isinstance(result, Success) else result

    return _map


def map_error[T, E, F](fn: Callable[[E], F]) -> Callable[[Result[T, E]], Result[T, F]]:
    def _map_error(result: Result[T, E]) -> Result[T, F]:
        return Failure(fn(result.error)) if isinstance(result, Failure) else result

    return _map_error


def apply[T, U, E](
    fn_result: Result[Callable[[T], U], E],
) -> Callable[[Result[T, E]], Result[U, E]]:
    """
    Apply a wrapped function to a wrapped value.

    When either side failed, the failure of ``fn_result`` takes precedence over
    the failure of the value.
    """

    def _apply(value_result: Result[T, E]) -> Result[U, E]:
        if isinstance(fn_result, Failure):
            return fn_result
        if isinstance(value_result, Failure):
            return value_result
        return Success(fn_result.value(value_result.value))

    return _apply


def flat_map[T, U, E](fn: Callable[[T], Result[U, E]]) -> Callable[[Result[T, E]], Result[U, E]]:
    def _flat_map(result: Result[T, E]) -> Result[U, E]:
        return fn(result.value) if isinstance(result, Success) else result

    return _flat_map


chain = flat_map


# --- Elimination ---


def fold[T, E, R](
    on_success: Callable[[T], R], on_failure: Callable[[E], R]
) -> Callable[[Result[T, E]], R]:
    def _fold(result: Result[T, E]) -> R:
        if isinstance(result, Success):
            return on_success(result.value)
        return on_failure(result.error)

    return _fold


def get_or_else[T, E](default: T) -> Callable[[Result[T, E]], T]:
    def _get_or_else(result: Result[T, E]) -> T:
        return result.value if isinstance(result, Success) else default

    return _get_or_else


def get_or_else_lazy[T, E](on_failure: Callable[[E], T]) -> Callable[[Result[T, E]], T]:
    """Compute the fallback from the error, only when there is one."""

    def _get_or_else_lazy(result: Result[T, E]) -> T:
        return result.value if isinstance(result, Success) else on_failure(result.error)

    return _get_or_else_lazy


def get_or_else_throw[T, E](
    make_error: Callable[[E], BaseException] | None = None,
) -> Callable[[Result[T, E]], T]:
    """
    Return the success value or raise.

    Args:
        make_error: Builds the exception from the failure payload. Defaults to
            an ``UnwrapError`` carrying the payload in ``.error``.

    Returns:
        A function extracting the value from a result.
    """

    def _get_or_else_throw(result: Result[T, E]) -> T:
        return result.get_or_else_throw(make_error)

    return _get_or_else_throw


# --- Bridges from raising code ---


def try_catch[T, E](
    fn: Callable[[], T],
    on_error: Callable[[Exception], E] = identity,
) -> Result[T, E]:
    """
    Run ``fn`` and capture any exception it raises as a ``Failure``.

    Args:
        fn: A zero-argument callable that may raise.
        on_error: Converts the caught exception into the error payload. By
            default the exception itself becomes the payload.

    Returns:
        ``Success`` with the return value of ``fn``, or ``Failure`` with the
        converted exception.
    """
    try:
        value = fn()
    except Exception as e:
        logger.debug("try_catch captured %s: %s", type(e).__name__, e)
        return Failure(on_error(e))
    return Success(value)


async def try_catch_async[T, E](
    fn: Callable[[], Awaitable[T]],
    on_error: Callable[[Exception], E] = identity,
) -> Result[T, E]:
    """
    Asynchronous counterpart of ``try_catch``.

    A raise while calling ``fn`` and a raise while awaiting what it returned
    are handled the same way. Cancellation is not an ``Exception`` and
    propagates.
    """
    try:
        value = await fn()
    except Exception as e:
        logger.debug("try_catch_async captured %s: %s", type(e).__name__, e)
        return Failure(on_error(e))
    return Success(value)


# --- Aggregation ---


def sequence[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect all successes, or return the first failure scanning left to right."""
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(values)


def traverse[T, U, E](
    fn: Callable[[T], Result[U, E]],
) -> Callable[[Iterable[T]], Result[list[U], E]]:
    def _traverse(values: Iterable[T]) -> Result[list[U], E]:
        return sequence([fn(value) for value in values])

    return _traverse


def traverse_async[T, U, E](
    fn: Callable[[T], Awaitable[Result[U, E]]],
) -> Callable[[Iterable[T]], Awaitable[Result[list[U], E]]]:
    """
    Await ``fn`` for each value, one at a time and in order.

    Stops at the first failure; ``fn`` is not called for the remaining values.
    """

    async def _traverse_async(values: Iterable[T]) -> Result[list[U], E]:
        collected: list[U] = []
        for value in values:
            result = await fn(value)
            if isinstance(result, Failure):
                return result
            collected.append(result.value)
        return Success(collected)

    return _traverse_async


__all__: list[str] = [
    "Failure",
    "Result",
    "Success",
    "apply",
    "chain",
    "failure",
    "flat_map",
    "fold",
    "get_or_else",
    "get_or_else_lazy",
    "get_or_else_throw",
    "is_failure",
    "is_success",
    "map",
    "map_error",
    "sequence",
    "success",
    "traverse",
    "traverse_async",
    "try_catch",
    "try_catch_async",
]
