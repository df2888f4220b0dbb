"""Top-level package for uintset."""

import importlib.metadata

from uintset.api import *  # noqa: F401,F403
from uintset.collect import Collector, into  # noqa: F401
from uintset.exceptions import (  # noqa: F401
    CollectorClosed,
    InvalidElement,
    InvalidPattern,
    SliceNotSupported,
    UintSetError,
)
from uintset.uintset import UintSet  # noqa: F401

__version__ = importlib.metadata.version(__name__)
