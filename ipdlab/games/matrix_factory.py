"""Factory for creating named payoff matrix presets.

This module provides a factory function to create PayoffPreset instances
from the four payoff values, validating them once at definition time.
"""

import math
from dataclasses import dataclass
from typing import Union

from ..core.types import PayoffMatrix

PayoffValue = Union[int, float]


@dataclass(frozen=True)
class PayoffPreset:
    """A named payoff matrix with a short explanation."""
    id: str
    name: str
    description: str
    matrix: PayoffMatrix


def create_payoff_preset(
    id: str,
    name: str,
    description: str,
    temptation: PayoffValue,
    reward: PayoffValue,
    punishment: PayoffValue,
    sucker: PayoffValue,
) -> PayoffPreset:
    """Create a payoff preset from the four payoff values.

    Args:
        id: Unique preset identifier (e.g., "stag_hunt")
        name: Display name (e.g., "Stag Hunt")
        description: Explanation of the incentives
        temptation: Payoff for defecting against a cooperator
        reward: Payoff for mutual cooperation
        punishment: Payoff for mutual defection
        sucker: Payoff for cooperating against a defector

    Returns:
        A PayoffPreset ready for tournaments.

    Raises:
        ValueError: If any payoff is not a finite number.

    Example:
        PRESET = create_payoff_preset(
            id="prisoners_dilemma",
            name="Prisoner's Dilemma",
            description="Classic dilemma...",
            temptation=5, reward=3, punishment=1, sucker=0,
        )
    """
    values = {
        "temptation": temptation,
        "reward": reward,
        "punishment": punishment,
        "sucker": sucker,
    }
    for field_name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Payoff '{field_name}' must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"Payoff '{field_name}' must be finite, got {value!r}")

    return PayoffPreset(
        id=id,
        name=name,
        description=description,
        matrix=PayoffMatrix(**values),
    )


def classify_matrix(matrix: PayoffMatrix) -> str:
    """Name the classic game a payoff ordering corresponds to.

    Args:
        matrix: Payoff matrix to inspect

    Returns:
        "prisoners_dilemma", "stag_hunt", "chicken" or "other"
    """
    t, r, p, s = matrix.temptation, matrix.reward, matrix.punishment, matrix.sucker
    if t > r > p > s:
        return "prisoners_dilemma"
    if r > t >= p > s:
        return "stag_hunt"
    if t > r > s > p:
        return "chicken"
    return "other"
