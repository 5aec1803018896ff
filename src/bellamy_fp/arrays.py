"""
Immutable sequence utilities.

Every function is pure: it reads the input sequence and builds a new list (or
returns a scalar/dict) without touching the caller's data. Functions that need
configuration are curried and take the sequence last::

    flow(arrays.filter(is_logged), arrays.sort_by(lambda m: m.eaten_at), arrays.take(5))

Several names (``map``, ``filter``, ``zip``, ``sum``, ``min``, ``max``,
``range``) shadow builtins on purpose; use the module qualified.
"""

import builtins
import functools
import math
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any

from .config import DEFAULT_RANGE_STEP
from .types import Comparator, Number, Predicate, Selector, SupportsLessThan


class _Membership:
    """Set-like lookup that tolerates unhashable elements.

    Hashable values go through a real set; anything else falls back to an
    equality scan.
    """

    __slots__ = ("_hashed", "_scanned")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._hashed: set[Any] = set()
        self._scanned: list[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        if isinstance(item, Hashable):
            try:
                self._hashed.add(item)
                return
            except TypeError:
                pass
        self._scanned.append(item)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Hashable):
            try:
                if item in self._hashed:
                    return True
            except TypeError:
                pass
            else:
                return any(item == seen for seen in self._scanned)
        # An unhashable item may still equal a hashed one (a set and a frozenset).
        return any(item == seen for seen in self._hashed) or any(item == seen for seen in self._scanned)


# --- Access ---


def head[T](items: Sequence[T]) -> T | None:
    return items[0] if items else None


def tail[T](items: Sequence[T]) -> list[T]:
    return list(items[1:])


def last[T](items: Sequence[T]) -> T | None:
    return items[-1] if items else None


def init[T](items: Sequence[T]) -> list[T]:
    return list(items[:-1])


def is_empty(items: Sequence[Any]) -> bool:
    return len(items) == 0


def length(items: Sequence[Any]) -> int:
    return len(items)


def at[T](index: int) -> Callable[[Sequence[T]], T | None]:
    """Safe indexing; negative indexes do not wrap around."""

    def _at(items: Sequence[T]) -> T | None:
        return items[index] if 0 <= index < len(items) else None

    return _at


# --- Building ---


def append[T](item: T) -> Callable[[Sequence[T]], list[T]]:
    def _append(items: Sequence[T]) -> list[T]:
        return [*items, item]

    return _append


def prepend[T](item: T) -> Callable[[Sequence[T]], list[T]]:
    def _prepend(items: Sequence[T]) -> list[T]:
        return [item, *items]

    return _prepend


def concat[T](other: Sequence[T]) -> Callable[[Sequence[T]], list[T]]:
    """``concat(other)(items) == [*items, *other]``."""

    def _concat(items: Sequence[T]) -> list[T]:
        return [*items, *other]

    return _concat


def reverse[T](items: Sequence[T]) -> list[T]:
    return list(reversed(items))


# --- Ordering ---


def sort[T](compare_fn: Comparator[T] | None = None) -> Callable[[Sequence[T]], list[T]]:
    """
    Stable sort.

    Without ``compare_fn`` elements are ordered ascending by ``<``. A
    ``compare_fn(a, b)`` returns a negative number, zero or a positive number
    like a classic comparator.
    """

    def _sort(items: Sequence[T]) -> list[T]:
        if compare_fn is None:
            return sorted(items)
        return sorted(items, key=functools.cmp_to_key(compare_fn))

    return _sort


def sort_by[T, K](
    selector: Selector[T, K], compare_fn: Comparator[K] | None = None
) -> Callable[[Sequence[T]], list[T]]:
    """Stable sort on a derived key, compared naturally unless ``compare_fn`` is given."""

    def _sort_by(items: Sequence[T]) -> list[T]:
        if compare_fn is None:
            return sorted(items, key=selector)
        key_wrapper = functools.cmp_to_key(compare_fn)
        return sorted(items, key=lambda item: key_wrapper(selector(item)))

    return _sort_by


# --- Predicates & Search ---


def includes[T](search_item: T) -> Callable[[Sequence[T]], bool]:
    def _includes(items: Sequence[T]) -> bool:
        return search_item in items

    return _includes


def some[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], bool]:
    def _some(items: Sequence[T]) -> bool:
        return any(predicate(item) for item in items)

    return _some


def every[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], bool]:
    def _every(items: Sequence[T]) -> bool:
        return all(predicate(item) for item in items)

    return _every


def find[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], T | None]:
    def _find(items: Sequence[T]) -> T | None:
        return next((item for item in items if predicate(item)), None)

    return _find


def find_index[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], int]:
    """Index of the first match, or ``-1``."""

    def _find_index(items: Sequence[T]) -> int:
        return next((i for i, item in enumerate(items) if predicate(item)), -1)

    return _find_index


# --- Filtering & Partitioning ---


def filter[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], list[T]]:
    def _filter(items: Sequence[T]) -> list[T]:
        return [item for item in items if predicate(item)]

    return _filter


def reject[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], list[T]]:
    def _reject(items: Sequence[T]) -> list[T]:
        return [item for item in items if not predicate(item)]

    return _reject


def partition[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], tuple[list[T], list[T]]]:
    """Split into ``(matching, non_matching)``, both in input order."""

    def _partition(items: Sequence[T]) -> tuple[list[T], list[T]]:
        passed: list[T] = []
        failed: list[T] = []
        for item in items:
            (passed if predicate(item) else failed).append(item)
        return passed, failed

    return _partition


def take[T](count: int) -> Callable[[Sequence[T]], list[T]]:
    def _take(items: Sequence[T]) -> list[T]:
        return list(items[: builtins.max(count, 0)])

    return _take


def drop[T](count: int) -> Callable[[Sequence[T]], list[T]]:
    def _drop(items: Sequence[T]) -> list[T]:
        return list(items[builtins.max(count, 0) :])

    return _drop


def take_while[T](predicate: Predicate[T]) -> Callable[[Sequence[T]], list[T]]:
    """Longest prefix satisfying ``predicate``; later elements are not inspected."""

    def _take_while(items: Sequence[T]) -> list[T]:
        result: list[T] = []
        for item in items:
            if not predicate(item):
                break
            result.append(item)
        return result

    return _take_while


# --- Transformations ---


def map[T, U](fn: Callable[[T], U]) -> Callable[[Sequence[T]], list[U]]:
    def _map(items: Sequence[T]) -> list[U]:
        return [fn(item) for item in items]

    return _map


def map_with_index[T, U](fn: Callable[[T, int], U]) -> Callable[[Sequence[T]], list[U]]:
    def _map_with_index(items: Sequence[T]) -> list[U]:
        return [fn(item, i) for i, item in enumerate(items)]

    return _map_with_index


def flat_map[T, U](fn: Callable[[T], Iterable[U]]) -> Callable[[Sequence[T]], list[U]]:
    def _flat_map(items: Sequence[T]) -> list[U]:
        return [out for item in items for out in fn(item)]

    return _flat_map


def flatten[T](items: Sequence[Iterable[T]]) -> list[T]:
    """Remove exactly one level of nesting."""
    return [inner for group in items for inner in group]


# --- Aggregation ---


def reduce[T, U](fn: Callable[[U, T], U], initial: U) -> Callable[[Sequence[T]], U]:
    def _reduce(items: Sequence[T]) -> U:
        return functools.reduce(fn, items, initial)

    return _reduce


def reduce_right[T, U](fn: Callable[[U, T], U], initial: U) -> Callable[[Sequence[T]], U]:
    def _reduce_right(items: Sequence[T]) -> U:
        return functools.reduce(fn, reversed(items), initial)

    return _reduce_right


def sum(items: Sequence[Number]) -> Number:
    """Total of ``items``; ``0`` for an empty sequence."""
    return builtins.sum(items, 0)


def product(items: Sequence[Number]) -> Number:
    """Product of ``items``; ``1`` for an empty sequence."""
    return math.prod(items, start=1)


def min[T: SupportsLessThan](items: Sequence[T]) -> T | None:
    return builtins.min(items, default=None)


def max[T: SupportsLessThan](items: Sequence[T]) -> T | None:
    return builtins.max(items, default=None)


def min_by[T](selector: Callable[[T], Any]) -> Callable[[Sequence[T]], T | None]:
    """Element with the smallest key; the first one wins ties."""

    def _min_by(items: Sequence[T]) -> T | None:
        return builtins.min(items, key=selector, default=None)

    return _min_by


def max_by[T](selector: Callable[[T], Any]) -> Callable[[Sequence[T]], T | None]:
    """Element with the largest key; the first one wins ties."""

    def _max_by(items: Sequence[T]) -> T | None:
        return builtins.max(items, key=selector, default=None)

    return _max_by


# --- Grouping ---


def group_by[T, K: Hashable](selector: Selector[T, K]) -> Callable[[Sequence[T]], dict[K, list[T]]]:
    """
    Group items by a derived key.

    Keys appear in the order they were first seen and each group keeps the
    input order of its items. ``selector`` must return hashable keys.
    """

    def _group_by(items: Sequence[T]) -> dict[K, list[T]]:
        groups: dict[K, list[T]] = {}
        for item in items:
            groups.setdefault(selector(item), []).append(item)
        return groups

    return _group_by


def count_by[T, K: Hashable](selector: Selector[T, K]) -> Callable[[Sequence[T]], dict[K, int]]:
    def _count_by(items: Sequence[T]) -> dict[K, int]:
        counts: dict[K, int] = {}
        for item in items:
            key = selector(item)
            counts[key] = counts.get(key, 0) + 1
        return counts

    return _count_by


# --- Deduplication & Set Operations ---


def unique[T](items: Iterable[T]) -> list[T]:
    """Drop repeated elements, keeping the first occurrence of each."""
    return unique_by(lambda item: item)(items)


def unique_by[T, K](selector: Selector[T, K]) -> Callable[[Iterable[T]], list[T]]:
    def _unique_by(items: Iterable[T]) -> list[T]:
        seen = _Membership()
        result: list[T] = []
        for item in items:
            key = selector(item)
            if key in seen:
                continue
            seen.add(key)
            result.append(item)
        return result

    return _unique_by


def union[T](other: Sequence[T]) -> Callable[[Sequence[T]], list[T]]:
    """Elements of ``items`` then ``other``, without duplicates."""

    def _union(items: Sequence[T]) -> list[T]:
        return unique([*items, *other])

    return _union


def intersection[T](other: Sequence[T]) -> Callable[[Sequence[T]], list[T]]:
    """Elements of ``items`` that also occur in ``other``."""

    def _intersection(items: Sequence[T]) -> list[T]:
        lookup = _Membership(other)
        return [item for item in items if item in lookup]

    return _intersection


def difference[T](other: Sequence[T]) -> Callable[[Sequence[T]], list[T]]:
    """Elements of ``items`` that do not occur in ``other``."""

    def _difference(items: Sequence[T]) -> list[T]:
        lookup = _Membership(other)
        return [item for item in items if item not in lookup]

    return _difference


# --- Shape ---


def chunk[T](size: int) -> Callable[[Sequence[T]], list[list[T]]]:
    """Consecutive groups of ``size``; the last may be shorter. ``[]`` when ``size <= 0``."""

    def _chunk(items: Sequence[T]) -> list[list[T]]:
        if size <= 0:
            return []
        return [list(items[i : i + size]) for i in builtins.range(0, len(items), size)]

    return _chunk


def zip[A, B](first: Sequence[A]) -> Callable[[Sequence[B]], list[tuple[A, B]]]:
    """
    Pair elements positionally: ``zip([1, 2, 3])(["a", "b"]) == [(1, "a"), (2, "b")]``.

    The result is as long as the shorter input.
    """

    def _zip(second: Sequence[B]) -> list[tuple[A, B]]:
        return list(builtins.zip(first, second))

    return _zip


def zip_with[A, B, C](
    fn: Callable[[A, B], C],
) -> Callable[[Sequence[A]], Callable[[Sequence[B]], list[C]]]:
    def _with_first(first: Sequence[A]) -> Callable[[Sequence[B]], list[C]]:
        def _zip_with(second: Sequence[B]) -> list[C]:
            return [fn(a, b) for a, b in builtins.zip(first, second)]

        return _zip_with

    return _with_first


# --- Generation ---


def range(start: Number, end: Number, step: Number = DEFAULT_RANGE_STEP) -> list[Number]:
    """
    Numbers from ``start`` (inclusive) to ``end`` (exclusive).

    ``step`` must be positive; a non-positive step yields an empty list rather
    than looping forever.
    """
    if step <= 0 or start >= end:
        return []
    count = math.ceil((end - start) / step)
    values = (start + i * step for i in builtins.range(count))
    return [value for value in values if value < end]


def repeat[T](value: T, count: int) -> list[T]:
    return [value] * builtins.max(count, 0)


replicate = repeat


__all__: list[str] = [
    "append",
    "at",
    "chunk",
    "concat",
    "count_by",
    "difference",
    "drop",
    "every",
    "filter",
    "find",
    "find_index",
    "flat_map",
    "flatten",
    "group_by",
    "head",
    "includes",
    "init",
    "intersection",
    "is_empty",
    "last",
    "length",
    "map",
    "map_with_index",
    "max",
    "max_by",
    "min",
    "min_by",
    "partition",
    "prepend",
    "product",
    "range",
    "reduce",
    "reduce_right",
    "reject",
    "repeat",
    "replicate",
    "reverse",
    "some",
    "sort",
    "sort_by",
    "sum",
    "tail",
    "take",
    "take_while",
    "union",
    "unique",
    "unique_by",
    "zip",
    "zip_with",
]
