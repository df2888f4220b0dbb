from __future__ import annotations

import itertools

import pytest

from uintset import (
    InvalidElement,
    InvalidPattern,
    UintSet,
    delete,
    difference,
    disjoint,
    empty,
    equal,
    from_elements,
    from_elements_with,
    from_pattern,
    intersection,
    length,
    member,
    put,
    stream,
    subset,
    to_list,
    union,
)

SAMPLES = [
    [],
    [0],
    [3, 1, 2],
    [5, 7, 10, 7],
    [0, 63, 64, 65],
    [1, 1000],
]


def test_empty() -> None:
    assert to_list(empty()) == []
    assert empty().bits == 0
    assert equal(empty(), UintSet())


def test_from_pattern() -> None:
    assert to_list(from_pattern(0b1101)) == [0, 2, 3]
    with pytest.raises(InvalidPattern):
        from_pattern(-5)


def test_from_elements() -> None:
    assert to_list(from_elements([10, 5, 7])) == [5, 7, 10]
    assert to_list(from_elements(range(3, 8))) == [3, 4, 5, 6, 7]
    assert to_list(from_elements(iter([3, 3, 3, 2, 2, 1]))) == [1, 2, 3]
    with pytest.raises(InvalidElement):
        from_elements([1, -2])


def test_from_elements_with() -> None:
    assert to_list(from_elements_with([1, 3, 1], lambda x: 2 * x)) == [2, 6]
    assert to_list(from_elements_with("abc", ord)) == [97, 98, 99]


def test_scenarios() -> None:
    a = from_elements([1, 2])
    b = from_elements([2, 3, 4])
    assert to_list(union(a, b)) == [1, 2, 3, 4]
    assert to_list(difference(a, b)) == [1]
    assert to_list(intersection(a, b)) == [2]
    assert not disjoint(a, b)
    assert disjoint(a, from_elements([3, 4]))


@pytest.mark.parametrize("elements", SAMPLES)  # type: ignore[misc]
def test_round_trip(elements: list[int]) -> None:
    shuffled = list(reversed(elements)) + elements
    assert to_list(from_elements(shuffled)) == sorted(set(elements))


@pytest.mark.parametrize("elements", SAMPLES)  # type: ignore[misc]
def test_to_list_is_strictly_ascending(elements: list[int]) -> None:
    members = to_list(from_elements(elements))
    assert all(x < y for x, y in zip(members, members[1:]))
    assert length(from_elements(elements)) == len(members)


@pytest.mark.parametrize("elements", SAMPLES)  # type: ignore[misc]
def test_stream_equals_to_list(elements: list[int]) -> None:
    us = from_elements(elements)
    assert list(stream(us)) == to_list(us)


@pytest.mark.parametrize("element", [0, 1, 63, 64, 4097])  # type: ignore[misc]
def test_put_delete_membership(sample_sets: list[UintSet], element: int) -> None:
    for us in sample_sets:
        added = put(us, element)
        assert member(added, element)
        assert equal(put(added, element), added)

        removed = delete(us, element)
        assert not member(removed, element)
        assert equal(delete(removed, element), removed)


def test_commutative(sample_sets: list[UintSet]) -> None:
    for a, b in itertools.product(sample_sets, repeat=2):
        assert equal(union(a, b), union(b, a))
        assert equal(intersection(a, b), intersection(b, a))


def test_associative(sample_sets: list[UintSet]) -> None:
    for a, b, c in itertools.product(sample_sets[:5], repeat=3):
        assert equal(union(union(a, b), c), union(a, union(b, c)))
        assert equal(
            intersection(intersection(a, b), c),
            intersection(a, intersection(b, c)),
        )


def test_identities(sample_sets: list[UintSet]) -> None:
    for a in sample_sets:
        assert equal(difference(a, a), empty())
        assert equal(union(a, empty()), a)
        assert equal(intersection(a, empty()), empty())


def test_disjoint_and_subset(sample_sets: list[UintSet]) -> None:
    for a, b in itertools.product(sample_sets, repeat=2):
        assert disjoint(a, b) == (length(intersection(a, b)) == 0)
        assert subset(a, union(a, b))
        assert subset(intersection(a, b), a)
        assert to_list(difference(a, b)) == [x for x in to_list(a) if x not in b]
