"""Bit-level operations on unbounded-width non-negative integers.

These functions know nothing about sets. They treat an :class:`int` as an
arbitrarily wide bit pattern, where bit ``0`` is the least significant bit,
and either query a position, return a new pattern with one position flipped,
or enumerate the positions holding a ``1``.

Python integers have no fixed width, so shifting and masking never wraps
around no matter how large the index is.

.. note::

   :func:`count_ones`, :func:`list_ones` and :func:`stream_ones` walk the
   pattern one bit at a time, so they cost time proportional to the position
   of the highest set bit rather than to the number of set bits.

"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Iterator, List

from .exceptions import InvalidElement, InvalidPattern

logger = logging.getLogger(__name__)


def check_pattern(bigint: Any) -> int:
    """Return `bigint` as an :class:`int` if it is a valid bit pattern.

    Raises
    ------
    InvalidPattern
        If `bigint` is not an integer or is negative.

    """
    if isinstance(bigint, bool) or not isinstance(bigint, Integral):
        logger.debug("rejecting non-integer bit pattern %r", bigint)
        raise InvalidPattern(f"bit pattern must be an integer, got {bigint!r}")
    if bigint < 0:
        logger.debug("rejecting negative bit pattern %d", bigint)
        raise InvalidPattern(
            f"bit pattern not greater than or equal to 0, bits == {bigint}"
        )
    return int(bigint)


def check_index(index: Any) -> int:
    """Return `index` as an :class:`int` if it is a valid bit index.

    Raises
    ------
    InvalidElement
        If `index` is not an integer or is negative.

    """
    if isinstance(index, bool) or not isinstance(index, Integral):
        logger.debug("rejecting non-integer bit index %r", index)
        raise InvalidElement(f"bit index must be an integer, got {index!r}")
    if index < 0:
        logger.debug("rejecting negative bit index %d", index)
        raise InvalidElement(f"bit not greater than or equal to 0, bit == {index}")
    return int(index)


def count_ones(bigint: int) -> int:
    """Count the bits of value ``1`` in `bigint`.

    Examples
    --------
    >>> count_ones(0)
    0
    >>> count_ones(3)
    2
    >>> count_ones(0b111_0000_1111)
    7

    """
    bigint = check_pattern(bigint)
    count = 0
    while bigint:
        count += bigint & 1
        bigint >>= 1
    return count


def get_bit(bigint: int, index: int) -> int:
    """Return the value of the bit at `index`.

    Indexes past the highest set bit are valid and return ``0``.

    Examples
    --------
    >>> get_bit(0b101, 0)
    1
    >>> get_bit(0b101, 1)
    0
    >>> get_bit(0b101, 99)
    0

    """
    return (bigint >> check_index(index)) & 1


def set_bit(bigint: int, index: int) -> int:
    """Return `bigint` with the bit at `index` set to ``1``.

    Examples
    --------
    >>> set_bit(0b101, 1)
    7
    >>> set_bit(0, 8)
    256

    """
    return bigint | (1 << check_index(index))


def unset_bit(bigint: int, index: int) -> int:
    """Return `bigint` with the bit at `index` set to ``0``.

    Examples
    --------
    >>> unset_bit(0b101, 0)
    4
    >>> unset_bit(0b111, 2)
    3
    >>> unset_bit(0b101, 1)
    5

    """
    index = check_index(index)
    if get_bit(bigint, index) == 1:
        return bigint ^ (1 << index)
    return bigint


def highest_bit(bigint: int) -> int:
    """Return the index of the highest set bit, or ``-1`` if `bigint` is zero.

    Examples
    --------
    >>> highest_bit(0)
    -1
    >>> highest_bit(0b1000)
    3

    """
    return check_pattern(bigint).bit_length() - 1


def list_ones(bigint: int) -> List[int]:
    """Return the indexes of the bits with value ``1`` in ascending order.

    Examples
    --------
    >>> list_ones(0)
    []
    >>> list_ones(0b1011)
    [0, 1, 3]

    """
    bigint = check_pattern(bigint)
    ones = []
    index = 0
    while bigint:
        if bigint & 1:
            ones.append(index)
        bigint >>= 1
        index += 1
    return ones


class OnesIterator(Iterator[int]):
    """Lazily yield the indexes of the ``1`` bits of a pattern.

    The iterator keeps the part of the pattern it has not looked at yet in
    :attr:`remaining`, shifted so that bit ``0`` of :attr:`remaining` is bit
    :attr:`index` of the original pattern. The original integer is never
    touched.

    Attributes
    ----------
    remaining
        The unvisited high bits of the pattern.
    index
        The position in the original pattern of the lowest bit of
        `remaining`.

    """

    __slots__ = "remaining", "index"

    def __init__(self, bigint: int) -> None:
        self.remaining = check_pattern(bigint)
        self.index = 0

    def __iter__(self) -> OnesIterator:
        return self

    def __next__(self) -> int:
        remaining = self.remaining
        index = self.index
        while remaining:
            bit = remaining & 1
            remaining >>= 1
            index += 1
            if bit:
                self.remaining = remaining
                self.index = index
                return index - 1
        self.remaining = 0
        self.index = index
        raise StopIteration

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(remaining={self.remaining:#b}, index={self.index:d})"
        )


def stream_ones(bigint: int) -> OnesIterator:
    """Return an iterator yielding the indexes of ``1`` bits in ascending order.

    Every call returns a new, independent iterator, so the same pattern can be
    traversed as many times as needed.

    Examples
    --------
    >>> ones = stream_ones(0b1010_1110)
    >>> next(ones)
    1
    >>> [index * 10 for index in ones]
    [20, 30, 50, 70]
    >>> list(stream_ones(0b1010_1110))
    [1, 2, 3, 5, 7]

    """
    return OnesIterator(bigint)
