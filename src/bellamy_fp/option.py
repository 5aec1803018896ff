"""
Defines the ``Option`` Algebraic Data Type for values that may be absent.

An ``Option`` is either ``Some(value)`` or ``Nothing``. It makes absence part
of a function's signature instead of relying on ``None`` leaking through call
chains, and it composes with ``map``/``flat_map``/``fold``.

All combinators are curried and take the option last, so they slot directly
into ``pipe``/``flow``::

    flow(from_nullable, map(str.strip), get_or_else(""))(raw)

The names ``map`` and ``filter`` shadow builtins on purpose; import the module
and use them qualified (``option.map``).
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Final, NoReturn, TypeGuard, final

from .exceptions import UnwrapError
from .types import Predicate, Thunk

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class Some[T]:
    """An option holding a value.

    The methods mirror the curried module functions for method-chaining call
    sites: ``from_nullable(raw).map(str.strip).get_or_else("")``.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def map[U](self, fn: Callable[[T], U]) -> "Some[U]":
        return Some(fn(self.value))

    def flat_map[U](self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        return fn(self.value)

    def filter(self, predicate: Predicate[T]) -> "Option[T]":
        return self if predicate(self.value) else none

    def fold[R](self, on_none: Callable[[], R], on_some: Callable[[T], R]) -> R:
        return on_some(self.value)

    def get_or_else(self, default: T) -> T:
        return self.value

    def get_or_else_lazy(self, get_default: Thunk[T]) -> T:
        return self.value

    def get_or_else_throw(self, make_error: Callable[[], BaseException] | None = None) -> T:
        return self.value

    def to_nullable(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Nothing:
    """An option holding nothing. Use the ``none`` singleton."""

    def __repr__(self) -> str:
        return "Nothing"

    def map(self, fn: Callable[[Any], Any]) -> "Nothing":
        return self

    def flat_map(self, fn: Callable[[Any], Any]) -> "Nothing":
        return self

    def filter(self, predicate: Predicate[Any]) -> "Nothing":
        return self

    def fold[R](self, on_none: Callable[[], R], on_some: Callable[[Any], R]) -> R:
        return on_none()

    def get_or_else[T](self, default: T) -> T:
        return default

    def get_or_else_lazy[T](self, get_default: Thunk[T]) -> T:
        return get_default()

    def get_or_else_throw(self, make_error: Callable[[], BaseException] | None = None) -> NoReturn:
        error = make_error() if make_error is not None else UnwrapError("Called get_or_else_throw on Nothing")
        logger.debug("Raising %s for an empty option", type(error).__name__)
        raise error

    def to_nullable(self) -> None:
        return None


# The Option type is a union of Some and Nothing; there is no third variant.
type Option[T] = Some[T] | Nothing

none: Final[Nothing] = Nothing()


# --- Constructors ---


def some[T](value: T) -> Some[T]:
    return Some(value)


def from_nullable[T](value: T | None) -> Option[T]:
    """``Some(value)`` unless ``value`` is ``None``."""
    return none if value is None else Some(value)


# --- Type Guards ---


def is_some[T](option: Option[T]) -> TypeGuard[Some[T]]:
    return isinstance(option, Some)


def is_none[T](option: Option[T]) -> TypeGuard[Nothing]:
    return isinstance(option, Nothing)


# --- Functor / Applicative / Monad ---


def map[T, U](fn: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    def _map(option: Option[T]) -> Option[U]:
        return Some(fn(option.value)) if isinstance(option, Some) else none

    return _map


def apply[T, U](fn_option: Option[Callable[[T], U]]) -> Callable[[Option[T]], Option[U]]:
    """Apply a wrapped function to a wrapped value when both are present."""

    def _apply(value_option: Option[T]) -> Option[U]:
        if isinstance(fn_option, Some) and isinstance(value_option, Some):
            return Some(fn_option.value(value_option.value))
        return none

    return _apply


def flat_map[T, U](fn: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    def _flat_map(option: Option[T]) -> Option[U]:
        return fn(option.value) if isinstance(option, Some) else none

    return _flat_map


chain = flat_map


def filter[T](predicate: Predicate[T]) -> Callable[[Option[T]], Option[T]]:
    def _filter(option: Option[T]) -> Option[T]:
        if isinstance(option, Some) and predicate(option.value):
            return option
        return none

    return _filter


# --- Elimination ---


def fold[T, R](on_none: Callable[[], R], on_some: Callable[[T], R]) -> Callable[[Option[T]], R]:
    """Pattern match: exactly one of ``on_none``/``on_some`` runs."""

    def _fold(option: Option[T]) -> R:
        return on_some(option.value) if isinstance(option, Some) else on_none()

    return _fold


def get_or_else[T](default: T) -> Callable[[Option[T]], T]:
    def _get_or_else(option: Option[T]) -> T:
        return option.value if isinstance(option, Some) else default

    return _get_or_else


def get_or_else_lazy[T](get_default: Thunk[T]) -> Callable[[Option[T]], T]:
    """Like ``get_or_else`` but only computes the default for ``Nothing``."""

    def _get_or_else_lazy(option: Option[T]) -> T:
        return option.value if isinstance(option, Some) else get_default()

    return _get_or_else_lazy


def get_or_else_throw[T](
    make_error: Callable[[], BaseException] | None = None,
) -> Callable[[Option[T]], T]:
    """
    Return the contained value or raise.

    Args:
        make_error: Builds the exception to raise for ``Nothing``. Defaults to
            an ``UnwrapError``.

    Returns:
        A function extracting the value from an option.
    """

    def _get_or_else_throw(option: Option[T]) -> T:
        return option.get_or_else_throw(make_error)

    return _get_or_else_throw


def to_nullable[T](option: Option[T]) -> T | None:
    return option.value if isinstance(option, Some) else None


# Python has a single absent value, so both escapes agree.
to_undefined = to_nullable


# --- Combining ---


def map2[A, B, C](fn: Callable[[A, B], C]) -> Callable[[Option[A]], Callable[[Option[B]], Option[C]]]:
    """Combine two options with a binary function; ``none`` if either is empty."""

    def _first(option_a: Option[A]) -> Callable[[Option[B]], Option[C]]:
        def _second(option_b: Option[B]) -> Option[C]:
            if isinstance(option_a, Some) and isinstance(option_b, Some):
                return Some(fn(option_a.value, option_b.value))
            return none

        return _second

    return _first


def sequence[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Turn options into an option of a list; the first ``Nothing`` wins."""
    values: list[T] = []
    for option in options:
        if not isinstance(option, Some):
            return none
        values.append(option.value)
    return Some(values)


def traverse[T, U](fn: Callable[[T], Option[U]]) -> Callable[[Iterable[T]], Option[list[U]]]:
    def _traverse(values: Iterable[T]) -> Option[list[U]]:
        return sequence([fn(value) for value in values])

    return _traverse


__all__: list[str] = [
    "Nothing",
    "Option",
    "Some",
    "apply",
    "chain",
    "filter",
    "flat_map",
    "fold",
    "from_nullable",
    "get_or_else",
    "get_or_else_lazy",
    "get_or_else_throw",
    "is_none",
    "is_some",
    "map",
    "map2",
    "none",
    "sequence",
    "some",
    "to_nullable",
    "to_undefined",
    "traverse",
]
