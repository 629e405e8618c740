"""Shared pytest fixtures."""

from typing import Callable, Sequence

import pytest


def _scripted(values: Sequence[float]) -> Callable[[], float]:
    remaining = list(values)
    last = remaining[-1] if remaining else 0.0

    def draw() -> float:
        nonlocal last
        if remaining:
            last = remaining.pop(0)
        return last

    return draw


@pytest.fixture
def sequence_random():
    """Factory for random functions that replay values, then repeat the last one."""
    return _scripted
