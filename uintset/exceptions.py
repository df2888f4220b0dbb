"""Exceptions raised by uintset."""


class UintSetError(Exception):
    """Base class for all uintset errors."""


class InvalidPattern(UintSetError, ValueError):
    """Raised when a raw bit pattern is negative or not an integer."""


class InvalidElement(UintSetError, ValueError, TypeError):
    """Raised when an element or bit index is negative or not an integer."""


class SliceNotSupported(UintSetError, TypeError):
    """Raised on positional access, which a bit vector cannot do efficiently."""


class CollectorClosed(UintSetError, RuntimeError):
    """Raised when a :class:`~uintset.collect.Collector` is used after closing."""
