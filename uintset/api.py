"""uintset user-facing functional API.

Every function here is pure: sets passed in are never modified and functions
that produce a set return a new one.

Examples
--------
>>> from uintset import from_elements, union, difference, to_list
>>> a = from_elements([1, 2])
>>> b = from_elements([2, 3, 4])
>>> to_list(union(a, b))
[1, 2, 3, 4]
>>> to_list(difference(a, b))
[1]

"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List

from public import public

from .typehints import Transform
from .uintset import UintSet


@public  # type: ignore[misc]
def empty() -> UintSet:
    """Return the empty set.

    >>> empty()
    UintSet<[]>

    """
    return UintSet()


@public  # type: ignore[misc]
def from_pattern(bits: int) -> UintSet:
    """Return the set whose members are the positions of the ``1`` bits of `bits`.

    Raises
    ------
    InvalidPattern
        If `bits` is negative.

    Examples
    --------
    >>> from_pattern(0b1101)
    UintSet<[0, 2, 3]>

    """
    return UintSet.from_bits(bits)


@public  # type: ignore[misc]
def from_elements(elements: Iterable[int]) -> UintSet:
    """Return a set containing every element of `elements`.

    >>> from_elements([10, 5, 7])
    UintSet<[5, 7, 10]>

    """
    return UintSet(elements)


@public  # type: ignore[misc]
def from_elements_with(elements: Iterable[Any], transform: Transform) -> UintSet:
    """Return a set containing `transform` applied to every element of `elements`.

    >>> from_elements_with([1, 3, 1], lambda x: 2 * x)
    UintSet<[2, 6]>

    """
    return UintSet(elements, transform)


@public  # type: ignore[misc]
def put(uint_set: UintSet, element: int) -> UintSet:
    """Return `uint_set` with `element` added."""
    return uint_set.put(element)


@public  # type: ignore[misc]
def delete(uint_set: UintSet, element: int) -> UintSet:
    """Return `uint_set` without `element`."""
    return uint_set.delete(element)


@public  # type: ignore[misc]
def member(uint_set: UintSet, element: int) -> bool:
    """Check whether `element` is in `uint_set`."""
    return uint_set.member(element)


@public  # type: ignore[misc]
def length(uint_set: UintSet) -> int:
    """Return the number of elements in `uint_set`."""
    return uint_set.length()


@public  # type: ignore[misc]
def equal(left: UintSet, right: UintSet) -> bool:
    """Check whether `left` and `right` have the same members."""
    return left.equal(right)


@public  # type: ignore[misc]
def union(left: UintSet, right: UintSet) -> UintSet:
    """Return the members of `left` or `right`."""
    return left.union(right)


@public  # type: ignore[misc]
def intersection(left: UintSet, right: UintSet) -> UintSet:
    """Return the members common to `left` and `right`."""
    return left.intersection(right)


@public  # type: ignore[misc]
def difference(left: UintSet, right: UintSet) -> UintSet:
    """Return the members of `left` that are not in `right`."""
    return left.difference(right)


@public  # type: ignore[misc]
def disjoint(left: UintSet, right: UintSet) -> bool:
    """Check whether `left` and `right` have no members in common."""
    return left.disjoint(right)


@public  # type: ignore[misc]
def subset(left: UintSet, right: UintSet) -> bool:
    """Check whether every member of `left` is in `right`."""
    return left.subset(right)


@public  # type: ignore[misc]
def to_list(uint_set: UintSet) -> List[int]:
    """Return the members of `uint_set` in ascending order."""
    return uint_set.to_list()


@public  # type: ignore[misc]
def stream(uint_set: UintSet) -> Iterator[int]:
    """Return an iterator lazily yielding the members of `uint_set` in order.

    >>> ones = stream(from_elements([10, 5, 7]))
    >>> next(ones)
    5
    >>> list(ones)
    [7, 10]

    """
    return uint_set.stream()
