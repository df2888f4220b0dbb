"""Build :class:`~uintset.uintset.UintSet` instances element by element.

A :class:`Collector` starts from a set (usually empty) and folds
:meth:`~uintset.uintset.UintSet.put` over each element it is sent. Because
sets are immutable the collector only ever swaps which set it holds.

>>> collector = UintSet([1]).into()
>>> collector.send(5)
UintSet<[1, 5]>
>>> collector.send(3)
UintSet<[1, 3, 5]>
>>> collector.done()
UintSet<[1, 3, 5]>

"""

from __future__ import annotations

from typing import Iterable

import toolz

from .exceptions import CollectorClosed
from .uintset import UintSet


class Collector:
    """Accumulate elements into a :class:`~uintset.uintset.UintSet`.

    Attributes
    ----------
    acc
        The set accumulated so far.
    closed
        Whether :meth:`done` or :meth:`halt` has been called.

    """

    __slots__ = "acc", "closed"

    def __init__(self, initial: UintSet = UintSet()) -> None:
        self.acc = initial
        self.closed = False

    def _check_open(self) -> None:
        if self.closed:
            raise CollectorClosed(f"{self.__class__.__name__} is already closed")

    def send(self, element: int) -> UintSet:
        """Put `element` in the accumulated set and return the result."""
        self._check_open()
        self.acc = self.acc.put(element)
        return self.acc

    def extend(self, elements: Iterable[int]) -> UintSet:
        """Put every element of `elements` in the accumulated set."""
        self._check_open()
        self.acc = toolz.reduce(UintSet.put, elements, self.acc)
        return self.acc

    def done(self) -> UintSet:
        """Close the collector and return the finished set."""
        self._check_open()
        self.closed = True
        return self.acc

    def halt(self) -> UintSet:
        """Stop collecting early, returning the accumulated set unchanged."""
        self.closed = True
        return self.acc

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.acc!r}, closed={self.closed})"


def into(elements: Iterable[int], initial: UintSet = UintSet()) -> UintSet:
    """Collect `elements` into `initial`.

    Examples
    --------
    >>> into([3, 1, 3])
    UintSet<[1, 3]>
    >>> into(range(2), UintSet([7]))
    UintSet<[0, 1, 7]>

    """
    collector = initial.into()
    collector.extend(elements)
    return collector.done()
