from __future__ import annotations

import pytest

from uintset import UintSet

SAMPLE_ELEMENTS = [
    [],
    [0],
    [1, 2],
    [2, 3, 4],
    [0, 63, 64, 65],
    [5, 7, 10],
    [1, 1000],
    [4097, 3],
]


@pytest.fixture(scope="session")  # type: ignore[misc]
def sample_sets() -> list[UintSet]:
    return [UintSet(sample) for sample in SAMPLE_ELEMENTS]


@pytest.fixture  # type: ignore[misc]
def big() -> UintSet:
    return UintSet([0, 100, 4097])
