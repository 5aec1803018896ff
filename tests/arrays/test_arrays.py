import copy
from collections.abc import Callable
from typing import Any

import pytest

from bellamy_fp import arrays

MEALS = [
    {"name": "oatmeal", "slot": "breakfast", "kcal": 350},
    {"name": "salad", "slot": "lunch", "kcal": 420},
    {"name": "eggs", "slot": "breakfast", "kcal": 300},
    {"name": "pasta", "slot": "dinner", "kcal": 700},
    {"name": "soup", "slot": "lunch", "kcal": 300},
]


def test_head_last_tail_init() -> None:
    assert arrays.head([1, 2, 3]) == 1
    assert arrays.last([1, 2, 3]) == 3
    assert arrays.tail([1, 2, 3]) == [2, 3]
    assert arrays.init([1, 2, 3]) == [1, 2]

    assert arrays.head([]) is None
    assert arrays.last([]) is None
    assert arrays.tail([]) == []
    assert arrays.init([]) == []


def test_at_is_safe_and_does_not_wrap() -> None:
    assert arrays.at(1)(["a", "b"]) == "b"
    assert arrays.at(2)(["a", "b"]) is None
    assert arrays.at(-1)(["a", "b"]) is None


def test_is_empty_and_length() -> None:
    assert arrays.is_empty([])
    assert not arrays.is_empty([0])
    assert arrays.length((1, 2, 3)) == 3


def test_append_prepend_concat_reverse() -> None:
    assert arrays.append(4)([1, 2, 3]) == [1, 2, 3, 4]
    assert arrays.prepend(0)([1, 2, 3]) == [0, 1, 2, 3]
    assert arrays.concat([3, 4])([1, 2]) == [1, 2, 3, 4]
    assert arrays.reverse([1, 2, 3]) == [3, 2, 1]


def test_sort_defaults_to_ascending_and_accepts_comparator() -> None:
    assert arrays.sort()([3, 1, 2]) == [1, 2, 3]
    assert arrays.sort(lambda a, b: b - a)([3, 1, 2]) == [3, 2, 1]


def test_sort_by_is_stable() -> None:
    by_kcal = arrays.sort_by(lambda m: m["kcal"])(MEALS)
    assert [m["name"] for m in by_kcal] == ["eggs", "soup", "oatmeal", "salad", "pasta"]

    descending = arrays.sort_by(lambda m: m["kcal"], lambda a, b: b - a)(MEALS)
    assert [m["name"] for m in descending] == ["pasta", "salad", "oatmeal", "eggs", "soup"]


def test_predicates_and_search() -> None:
    assert arrays.includes(2)([1, 2, 3])
    assert not arrays.includes(5)([1, 2, 3])
    assert arrays.some(lambda x: x > 2)([1, 2, 3])
    assert not arrays.some(lambda x: x > 2)([])
    assert arrays.every(lambda x: x > 0)([1, 2, 3])
    assert arrays.every(lambda x: x > 0)([])
    assert arrays.find(lambda m: m["slot"] == "lunch")(MEALS)["name"] == "salad"
    assert arrays.find(lambda m: m["slot"] == "snack")(MEALS) is None
    assert arrays.find_index(lambda m: m["slot"] == "dinner")(MEALS) == 3
    assert arrays.find_index(lambda m: m["slot"] == "snack")(MEALS) == -1


def test_filter_reject_partition() -> None:
    is_even = lambda x: x % 2 == 0  # noqa: E731
    assert arrays.filter(is_even)([1, 2, 3, 4, 5]) == [2, 4]
    assert arrays.reject(is_even)([1, 2, 3, 4, 5]) == [1, 3, 5]
    assert arrays.partition(is_even)([1, 2, 3, 4, 5]) == ([2, 4], [1, 3, 5])


@pytest.mark.parametrize(
    ("count", "taken", "dropped"),
    [
        (2, [1, 2], [3]),
        (0, [], [1, 2, 3]),
        (10, [1, 2, 3], []),
        (-1, [], [1, 2, 3]),
    ],
)
def test_take_and_drop_clamp_count(count: int, taken: list[int], dropped: list[int]) -> None:
    assert arrays.take(count)([1, 2, 3]) == taken
    assert arrays.drop(count)([1, 2, 3]) == dropped


def test_take_while_stops_at_first_failure() -> None:
    inspected: list[int] = []

    def small(x: int) -> bool:
        inspected.append(x)
        return x < 3

    assert arrays.take_while(small)([1, 2, 3, 1, 0]) == [1, 2]
    assert inspected == [1, 2, 3]


def test_mapping_helpers() -> None:
    assert arrays.map(lambda x: x * 2)([1, 2]) == [2, 4]
    assert arrays.map_with_index(lambda x, i: f"{i}:{x}")(["a", "b"]) == ["0:a", "1:b"]
    assert arrays.flat_map(lambda x: [x, x])([1, 2]) == [1, 1, 2, 2]
    assert arrays.flatten([[1], [2, 3], []]) == [1, 2, 3]
    assert arrays.flatten([[[1]], [2]]) == [[1], 2]


def test_reduce_and_reduce_right() -> None:
    assert arrays.reduce(lambda acc, x: acc + x, "")(["a", "b", "c"]) == "abc"
    assert arrays.reduce_right(lambda acc, x: acc + x, "")(["a", "b", "c"]) == "cba"


def test_numeric_aggregates() -> None:
    assert arrays.sum([]) == 0
    assert arrays.product([]) == 1
    assert arrays.sum([1, 2, 3.5]) == 6.5
    assert arrays.product([2, 3, 4]) == 24
    assert arrays.min([3, 1, 2]) == 1
    assert arrays.max([3, 1, 2]) == 3
    assert arrays.min([]) is None
    assert arrays.max([]) is None


def test_min_by_and_max_by_keep_first_extremum() -> None:
    assert arrays.min_by(lambda m: m["kcal"])(MEALS)["name"] == "eggs"
    assert arrays.max_by(lambda m: m["slot"] == "lunch")(MEALS)["name"] == "salad"
    assert arrays.min_by(lambda m: m["kcal"])([]) is None
    assert arrays.max_by(lambda m: m["kcal"])([]) is None


def test_group_by_preserves_order() -> None:
    groups = arrays.group_by(lambda x: x % 2)([1, 2, 3, 4])
    assert groups == {1: [1, 3], 0: [2, 4]}
    assert list(groups) == [1, 0]

    by_slot = arrays.group_by(lambda m: m["slot"])(MEALS)
    assert [m["name"] for m in by_slot["breakfast"]] == ["oatmeal", "eggs"]


def test_count_by() -> None:
    assert arrays.count_by(lambda m: m["slot"])(MEALS) == {"breakfast": 2, "lunch": 2, "dinner": 1}
    assert arrays.count_by(len)([]) == {}


def test_chunk() -> None:
    assert arrays.chunk(2)([1, 2, 3, 4, 5]) == [[1, 2], [3, 4], [5]]
    assert arrays.chunk(5)([1, 2]) == [[1, 2]]
    assert arrays.chunk(0)([1, 2]) == []
    assert arrays.chunk(-3)([1, 2]) == []
    assert arrays.chunk(2)([]) == []


def test_zip_truncates_to_shorter_input() -> None:
    assert arrays.zip([1, 2, 3])(["a", "b"]) == [(1, "a"), (2, "b")]
    assert arrays.zip([])(["a"]) == []


def test_zip_with_combines_positionally() -> None:
    assert arrays.zip_with(lambda a, b: a * b)([1, 2, 3])([10, 20]) == [10, 40]
    assert arrays.zip_with(lambda a, b: f"{a}{b}")(["x"])(["y", "z"]) == ["xy"]


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((0, 5), [0, 1, 2, 3, 4]),
        ((1, 10, 3), [1, 4, 7]),
        ((0, 1, 0.25), [0, 0.25, 0.5, 0.75]),
        ((5, 5), []),
        ((5, 0), []),
        ((0, 5, 0), []),
        ((0, 5, -1), []),
    ],
)
def test_range(args: tuple[float, ...], expected: list[float]) -> None:
    assert arrays.range(*args) == expected


def test_repeat_and_replicate() -> None:
    assert arrays.repeat("x", 3) == ["x", "x", "x"]
    assert arrays.replicate(0, 2) == [0, 0]
    assert arrays.repeat("x", 0) == []
    assert arrays.repeat("x", -2) == []


COMBINATORS: list[Callable[[list[Any]], Any]] = [
    arrays.tail,
    arrays.init,
    arrays.reverse,
    arrays.append(9),
    arrays.prepend(9),
    arrays.concat([9]),
    arrays.sort(),
    arrays.sort(lambda a, b: b - a),
    arrays.sort_by(lambda x: -x),
    arrays.filter(lambda x: x > 1),
    arrays.reject(lambda x: x > 1),
    arrays.partition(lambda x: x > 1),
    arrays.take(2),
    arrays.drop(2),
    arrays.take_while(lambda x: x > 1),
    arrays.map(lambda x: x + 1),
    arrays.flat_map(lambda x: [x]),
    arrays.reduce(lambda acc, x: acc + x, 0),
    arrays.reduce_right(lambda acc, x: acc + x, 0),
    arrays.group_by(lambda x: x % 2),
    arrays.count_by(lambda x: x % 2),
    arrays.unique,
    arrays.unique_by(lambda x: x % 2),
    arrays.union([5, 6]),
    arrays.intersection([1, 3]),
    arrays.difference([1, 3]),
    arrays.chunk(2),
    arrays.zip([1, 2]),
    arrays.zip_with(lambda a, b: a + b)([1, 2]),
    arrays.sum,
    arrays.product,
    arrays.min,
    arrays.max,
    arrays.min_by(lambda x: x),
    arrays.max_by(lambda x: x),
]


@pytest.mark.parametrize("combinator", COMBINATORS)
def test_combinators_never_mutate_input(combinator: Callable[[list[Any]], Any]) -> None:
    items = [3, 1, 2, 3, 1]
    snapshot = copy.deepcopy(items)
    output = combinator(items)
    assert items == snapshot
    assert output is not items
