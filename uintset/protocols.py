"""Capability protocols implemented by :class:`~uintset.uintset.UintSet`."""

from __future__ import annotations

import abc
from typing import Any, Callable, Iterator, TypeVar

from typing_extensions import Protocol

from .exceptions import SliceNotSupported

E = TypeVar("E")
A = TypeVar("A")


class Displayable(Protocol):
    """A protocol for objects with a debugging representation."""

    __slots__ = ()

    @abc.abstractmethod
    def __repr__(self) -> str:
        """Return the debugging representation of `self`."""


class Enumerable(Protocol[E]):
    """A protocol for finite collections consumed element by element.

    Implementations provide a count and a membership test that do not
    enumerate, and a fold over the elements in iteration order. Positional
    access is refused by default.

    """

    __slots__ = ()

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the number of elements."""

    @abc.abstractmethod
    def __contains__(self, element: Any) -> bool:
        """Return whether `element` is in `self`."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[E]:
        """Iterate over the elements of `self`."""

    @abc.abstractmethod
    def reduce(self, function: Callable[[A, E], A], initial: A) -> A:
        """Fold `function` over the elements of `self`, starting at `initial`."""

    def __getitem__(self, key: Any) -> E:
        """Refuse positional access.

        Raises
        ------
        SliceNotSupported
            Always.

        """
        raise SliceNotSupported(
            f"{self.__class__.__name__!r} object does not support "
            f"positional access, got key {key!r}"
        )


class Collectable(Protocol):
    """A protocol for collections that can be built up element by element."""

    __slots__ = ()

    @abc.abstractmethod
    def into(self) -> Any:
        """Return a collector seeded with `self`."""
