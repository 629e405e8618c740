"""Deterministic pseudo-random sources.

A random source is any zero-argument callable returning a float in [0, 1).
Seeded sources use the mulberry32 generator so a given seed always yields
the same stream; string seeds are hashed to a 32-bit integer first.
"""

import math
import random
from typing import Callable, Optional, Union

RandomSource = Callable[[], float]
Seed = Union[int, float, str]

_UINT32_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_ZERO_SEED_STATE = 0xDEADBEEF
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """Multiply two 32-bit values keeping the low 32 bits."""
    return (a * b) & _UINT32_MASK


def string_to_seed(value: str) -> int:
    """Hash a string to an unsigned 32-bit seed.

    Polynomial rolling hash with multiplier 31 over UTF-16 code units,
    wrapped to 32 bits.

    Args:
        value: Seed text (e.g. "seed-42")

    Returns:
        Unsigned 32-bit integer
    """
    encoded = value.encode("utf-16-le")
    hash_value = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        hash_value = (_imul(31, hash_value) + code_unit) & _UINT32_MASK
    return hash_value


def normalize_seed(seed: Seed) -> int:
    """Convert a numeric or string seed to an unsigned 32-bit integer."""
    if isinstance(seed, str):
        return string_to_seed(seed)
    if isinstance(seed, float) and not math.isfinite(seed):
        return 0
    return int(seed) & _UINT32_MASK


class Mulberry32:
    """32-bit state, fixed-increment multiply-xorshift generator."""

    def __init__(self, seed: int):
        self.state = seed or _ZERO_SEED_STATE

    def __call__(self) -> float:
        self.state = (self.state + _INCREMENT) & _UINT32_MASK
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _UINT32_MASK
        return ((t ^ (t >> 14)) & _UINT32_MASK) / _TWO_POW_32


def create_random_source(seed: Optional[Seed] = None) -> RandomSource:
    """Create a random source.

    Args:
        seed: Optional numeric or string seed. Without a seed the platform
            default generator is returned and results are not reproducible.

    Returns:
        Callable producing floats in [0, 1)
    """
    if seed is None:
        return random.random
    return Mulberry32(normalize_seed(seed))
