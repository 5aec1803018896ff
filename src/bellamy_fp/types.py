from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsLessThan(Protocol):
    """Anything orderable with ``<``; natural ordering for sort and min/max."""

    def __lt__(self, other: Any, /) -> bool: ...


type Number = int | float
type Predicate[T] = Callable[[T], bool]
type Selector[T, K] = Callable[[T], K]
type Comparator[T] = Callable[[T, T], int]
type Thunk[T] = Callable[[], T]


__all__ = ["Comparator", "Number", "Predicate", "Selector", "SupportsLessThan", "Thunk"]
