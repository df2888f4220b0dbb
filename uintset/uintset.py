"""An immutable set of unsigned integers stored as a single bit vector.

A :class:`UintSet` holds one :class:`int`, :attr:`UintSet.bits`, whose bit
``n`` is ``1`` if and only if ``n`` is a member of the set. The empty set is
``bits == 0``:

>>> UintSet().bits
0
>>> UintSet([0]).bits
1
>>> UintSet([0, 1]).bits
3
>>> UintSet.from_bits(0b1101)
UintSet<[0, 2, 3]>

Every set operation is a bitwise operator on the two patterns, and every
operation that produces a set returns a new :class:`UintSet`; instances are
never modified.

.. note::

   Memory use is proportional to the largest member, and :func:`len`,
   iteration and :meth:`UintSet.to_list` take time proportional to the
   largest member rather than to the number of members. ``UintSet([10**6])``
   holds one element in a million-bit integer.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Any, Iterable, List, Optional, Tuple

import toolz

from .bitops import (
    OnesIterator,
    check_pattern,
    count_ones,
    get_bit,
    list_ones,
    set_bit,
    stream_ones,
    unset_bit,
)
from .protocols import Collectable, Displayable, Enumerable
from .typehints import A, Folder, Transform

if TYPE_CHECKING:
    from .collect import Collector


class UintSet(AbstractSet[int], Enumerable[int], Collectable, Displayable):
    """An immutable set of non-negative integers.

    Parameters
    ----------
    elements
        Non-negative integers to put in the set. Duplicates are absorbed.
    transform
        An optional function applied to each element before it is added.

    Raises
    ------
    InvalidElement
        If an element (after `transform`) is negative or not an integer.

    Examples
    --------
    >>> UintSet()
    UintSet<[]>
    >>> UintSet([10, 5, 7])
    UintSet<[5, 7, 10]>
    >>> UintSet(range(3, 8))
    UintSet<[3, 4, 5, 6, 7]>
    >>> UintSet([3, 3, 3, 2, 2, 1])
    UintSet<[1, 2, 3]>
    >>> UintSet([1, 3, 1], lambda x: 2 * x)
    UintSet<[2, 6]>

    Membership tests raise :class:`~uintset.exceptions.InvalidElement` for
    anything that is not a non-negative integer, rather than returning
    ``False``. Comparisons and operators that consult membership against a
    foreign set therefore raise too, for example ``UintSet([1]) >= {"a"}``
    and ``UintSet([1]).issuperset(["a"])``.

    """

    __slots__ = ("_bits",)

    def __init__(
        self, elements: Iterable[Any] = (), transform: Optional[Transform] = None
    ) -> None:
        if transform is not None:
            elements = map(transform, elements)
        object.__setattr__(self, "_bits", toolz.reduce(set_bit, elements, 0))

    @classmethod
    def from_bits(cls, bits: int) -> UintSet:
        """Construct a set reading `bits` as a bit pattern.

        This is the only constructor exposing the internal representation.

        Raises
        ------
        InvalidPattern
            If `bits` is negative or not an integer.

        Examples
        --------
        >>> UintSet.from_bits(0)
        UintSet<[]>
        >>> UintSet.from_bits(2)
        UintSet<[1]>
        >>> UintSet.from_bits(0b111010)
        UintSet<[1, 3, 4, 5]>

        """
        return cls._wrap(check_pattern(bits))

    @classmethod
    def _wrap(cls, bits: int) -> UintSet:
        self = cls.__new__(cls)
        object.__setattr__(self, "_bits", bits)
        return self

    @classmethod
    def _from_iterable(cls, iterable: Iterable[int]) -> UintSet:
        return cls(iterable)

    @classmethod
    def _as_uintset(cls, other: Iterable[int]) -> UintSet:
        return other if isinstance(other, UintSet) else cls(other)

    @classmethod
    def _coerce(cls, other: Any) -> Optional[UintSet]:
        if isinstance(other, Iterable):
            return cls._as_uintset(other)
        return None

    @property
    def bits(self) -> int:
        """Return the bit pattern backing the set."""
        return self._bits

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __reduce__(self) -> Tuple[Any, Tuple[int]]:
        return self.__class__.from_bits, (self._bits,)

    # Element operations

    def put(self, element: int) -> UintSet:
        """Return a copy of the set with `element` added.

        >>> UintSet([1, 2, 3]).put(3)
        UintSet<[1, 2, 3]>
        >>> UintSet([1, 2, 3]).put(4)
        UintSet<[1, 2, 3, 4]>

        """
        return self._wrap(set_bit(self._bits, element))

    def delete(self, element: int) -> UintSet:
        """Return a copy of the set without `element`.

        >>> UintSet([1, 2, 3]).delete(4)
        UintSet<[1, 2, 3]>
        >>> UintSet([1, 2, 3]).delete(2)
        UintSet<[1, 3]>

        """
        return self._wrap(unset_bit(self._bits, element))

    def member(self, element: int) -> bool:
        """Check whether `element` is in the set.

        Raises
        ------
        InvalidElement
            If `element` is negative or not an integer.

        """
        return get_bit(self._bits, element) == 1

    def length(self) -> int:
        """Return the number of elements.

        This counts bits up to the largest member, so it is linear in the
        width of the pattern, not constant.

        >>> UintSet([10, 20, 30]).length()
        3

        """
        return count_ones(self._bits)

    # Set algebra

    def equal(self, other: UintSet) -> bool:
        """Check whether two sets have the same members."""
        return self._bits == other._bits

    def union(self, other: UintSet) -> UintSet:
        """Return the members of either set.

        >>> UintSet([1, 2]).union(UintSet([2, 3, 4]))
        UintSet<[1, 2, 3, 4]>

        """
        return self._wrap(self._bits | other._bits)

    def intersection(self, other: UintSet) -> UintSet:
        """Return the members the two sets have in common.

        >>> UintSet([1, 2]).intersection(UintSet([2, 3, 4]))
        UintSet<[2]>
        >>> UintSet([1, 2]).intersection(UintSet([3, 4]))
        UintSet<[]>

        """
        return self._wrap(self._bits & other._bits)

    def difference(self, other: UintSet) -> UintSet:
        """Return the members of `self` that are not in `other`.

        >>> UintSet([1, 2]).difference(UintSet([2, 3, 4]))
        UintSet<[1]>

        """
        return self._wrap((self._bits & other._bits) ^ self._bits)

    def symmetric_difference(self, other: UintSet) -> UintSet:
        """Return the members of exactly one of the two sets.

        >>> UintSet([1, 2]).symmetric_difference(UintSet([2, 3]))
        UintSet<[1, 3]>

        """
        return self._wrap(self._bits ^ other._bits)

    def disjoint(self, other: UintSet) -> bool:
        """Check whether the sets have no members in common.

        >>> UintSet([1, 2]).disjoint(UintSet([3, 4]))
        True
        >>> UintSet([1, 2]).disjoint(UintSet([2, 3]))
        False

        """
        return (self._bits & other._bits) == 0

    def subset(self, other: UintSet) -> bool:
        """Check whether every member of `self` is in `other`.

        >>> UintSet([1, 2]).subset(UintSet([1, 2, 3]))
        True
        >>> UintSet([1, 2, 3]).subset(UintSet([1, 2]))
        False

        """
        return self.difference(other)._bits == 0

    def isdisjoint(self, other: Iterable[int]) -> bool:
        """Check whether `self` and the elements of `other` have nothing in common."""
        coerced = self._coerce(other)
        if coerced is None:
            return super().isdisjoint(other)
        return self.disjoint(coerced)

    def issubset(self, other: Iterable[int]) -> bool:
        """Check whether every member of `self` is in `other`."""
        return self.subset(self._as_uintset(other))

    def issuperset(self, other: Iterable[int]) -> bool:
        """Check whether every element of `other` is in `self`."""
        return self._as_uintset(other).subset(self)

    # Enumeration

    def to_list(self) -> List[int]:
        """Return the members in ascending order.

        >>> UintSet([2, 3, 1]).to_list()
        [1, 2, 3]

        """
        return list_ones(self._bits)

    def stream(self) -> OnesIterator:
        """Return an iterator lazily yielding the members in ascending order.

        >>> [x * 10 for x in UintSet([10, 5, 7]).stream()]
        [50, 70, 100]

        """
        return stream_ones(self._bits)

    def reduce(self, function: Folder[A], initial: A) -> A:
        """Fold `function` over the members in ascending order.

        >>> import operator
        >>> UintSet([1, 2, 3]).reduce(operator.add, 10)
        16

        """
        return toolz.reduce(function, self.to_list(), initial)

    def into(self) -> Collector:
        """Return a :class:`~uintset.collect.Collector` seeded with this set."""
        from uintset import collect

        return collect.Collector(self)

    # Python protocols

    def __contains__(self, element: Any) -> bool:
        """Check whether `element` is in the set."""
        return self.member(element)

    def __iter__(self) -> OnesIterator:
        """Iterate over the elements of the set in ascending order."""
        return self.stream()

    def __len__(self) -> int:
        """Return the number of set bits."""
        return self.length()

    def __bool__(self) -> bool:
        """Return whether the set has any members."""
        return self._bits != 0

    def __eq__(self, other: Any) -> bool:
        """Return whether `self` and `other` have the same bit pattern."""
        if not isinstance(other, UintSet):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: Any) -> bool:
        """Return whether `self` and `other` have different bit patterns."""
        if not isinstance(other, UintSet):
            return NotImplemented
        return not self.equal(other)

    def __hash__(self) -> int:
        """Return the hash of the bit pattern."""
        return hash(self._bits)

    def __le__(self, other: Any) -> bool:
        """Return whether `self` is a subset of `other`."""
        if not isinstance(other, UintSet):
            return super().__le__(other)
        return self.subset(other)

    def __lt__(self, other: Any) -> bool:
        """Return whether `self` is a proper subset of `other`."""
        if not isinstance(other, UintSet):
            return super().__lt__(other)
        return self.subset(other) and not self.equal(other)

    def __ge__(self, other: Any) -> bool:
        """Return whether `self` is a superset of `other`."""
        if not isinstance(other, UintSet):
            return super().__ge__(other)
        return other.subset(self)

    def __gt__(self, other: Any) -> bool:
        """Return whether `self` is a proper superset of `other`."""
        if not isinstance(other, UintSet):
            return super().__gt__(other)
        return other.subset(self) and not self.equal(other)

    def __or__(self, other: Any) -> UintSet:
        """Return the union of `self` and `other`."""
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.union(coerced)

    __ror__ = __or__

    def __and__(self, other: Any) -> UintSet:
        """Return the intersection of `self` and `other`."""
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.intersection(coerced)

    __rand__ = __and__

    def __xor__(self, other: Any) -> UintSet:
        """Return the symmetric difference of `self` and `other`."""
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.symmetric_difference(coerced)

    __rxor__ = __xor__

    def __sub__(self, other: Any) -> UintSet:
        """Return the members of `self` that are not in `other`."""
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.difference(coerced)

    def __rsub__(self, other: Any) -> UintSet:
        """Return the elements of `other` that are not in `self`."""
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.difference(self)

    def __repr__(self) -> str:
        """Return the string representation of a set.

        >>> UintSet([1, 2])
        UintSet<[1, 2]>

        """
        return f"{self.__class__.__name__}<{self.to_list()!r}>"
