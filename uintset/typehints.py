"""Various type definitions used throughout uintset."""

from typing import Any, Callable, TypeVar

A = TypeVar("A")

Transform = Callable[[Any], int]
Folder = Callable[[A, int], A]
