"""Core module for the ipdlab package."""

from .config import (
    DEFAULT_ROUNDS_PER_MATCH,
    DEFAULT_ERROR_RATE,
    DEFAULT_ELO_BASE_RATING,
    DEFAULT_ELO_K_FACTOR,
    DEFAULT_MUTATION_RATE,
    DEFAULT_TOURNAMENT_SELECTION_SIZE,
    DEFAULT_FITNESS_ROUNDS,
    SWISS_LEADERBOARD_SIZE,
)
from .random import (
    RandomSource,
    Seed,
    Mulberry32,
    string_to_seed,
    normalize_seed,
    create_random_source,
)
from .utils import (
    to_base36,
    round_half_up,
    finite_values,
)
from .types import (
    Move,
    PayoffMatrix,
    DEFAULT_PAYOFF_MATRIX,
    GameHistory,
    Strategy,
    FunctionStrategy,
    MatchResult,
)

__all__ = [
    # Configuration constants
    "DEFAULT_ROUNDS_PER_MATCH",
    "DEFAULT_ERROR_RATE",
    "DEFAULT_ELO_BASE_RATING",
    "DEFAULT_ELO_K_FACTOR",
    "DEFAULT_MUTATION_RATE",
    "DEFAULT_TOURNAMENT_SELECTION_SIZE",
    "DEFAULT_FITNESS_ROUNDS",
    "SWISS_LEADERBOARD_SIZE",
    # Randomness
    "RandomSource",
    "Seed",
    "Mulberry32",
    "string_to_seed",
    "normalize_seed",
    "create_random_source",
    # Types
    "Move",
    "PayoffMatrix",
    "DEFAULT_PAYOFF_MATRIX",
    "GameHistory",
    "Strategy",
    "FunctionStrategy",
    "MatchResult",
    # Utilities
    "to_base36",
    "round_half_up",
    "finite_values",
]
