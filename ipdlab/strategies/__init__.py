"""Strategy catalog: classic hand-written strategies and genetic strategies."""

from .classic import (
    ALWAYS_COOPERATE,
    ALWAYS_DEFECT,
    TIT_FOR_TAT,
    SUSPICIOUS_TIT_FOR_TAT,
    GENEROUS_TIT_FOR_TAT,
    TIT_FOR_TWO_TATS,
    GRUDGER,
    SOFT_GRUDGER,
    PAVLOV,
    PROBER,
    ALTERNATOR,
    RANDOM,
    CLASSIC_STRATEGIES,
)
from .genetic import (
    GeneticStrategy,
    create_genetic_strategy,
    introductory_genetic,
)

# Strategy pool used when a tournament is run without an explicit roster
DEFAULT_STRATEGIES = [*CLASSIC_STRATEGIES, introductory_genetic]

__all__ = [
    # Classic strategies
    "ALWAYS_COOPERATE",
    "ALWAYS_DEFECT",
    "TIT_FOR_TAT",
    "SUSPICIOUS_TIT_FOR_TAT",
    "GENEROUS_TIT_FOR_TAT",
    "TIT_FOR_TWO_TATS",
    "GRUDGER",
    "SOFT_GRUDGER",
    "PAVLOV",
    "PROBER",
    "ALTERNATOR",
    "RANDOM",
    "CLASSIC_STRATEGIES",
    # Genetic
    "GeneticStrategy",
    "create_genetic_strategy",
    "introductory_genetic",
    # Registry
    "DEFAULT_STRATEGIES",
]
