"""IPD Lab - Iterated Prisoner's Dilemma tournaments and genetic strategy evolution."""

from .core import (
    DEFAULT_ROUNDS_PER_MATCH,
    DEFAULT_ERROR_RATE,
    Move,
    PayoffMatrix,
    DEFAULT_PAYOFF_MATRIX,
    GameHistory,
    Strategy,
    FunctionStrategy,
    MatchResult,
    create_random_source,
)
from .games import (
    PAYOFF_PRESETS,
    get_payoff_preset,
    list_payoff_presets,
)
from .engine import play_match
from .strategies import (
    CLASSIC_STRATEGIES,
    DEFAULT_STRATEGIES,
    GeneticStrategy,
    create_genetic_strategy,
)
from .analytics import (
    update_elo_rating,
    process_elo_matches,
    build_head_to_head_matrix,
    summarize_results,
    summarize_evolution,
)
from .experiments import (
    TieBreaker,
    SingleRoundRobin,
    DoubleRoundRobin,
    SwissFormat,
    TournamentOutcome,
    Tournament,
    simulate_tournament,
)
from .evolution import (
    EvolutionSettings,
    EvolutionSummary,
    EvolutionHooks,
    create_basic_evolution_engine,
    get_evolution_settings_issues,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DEFAULT_ROUNDS_PER_MATCH",
    "DEFAULT_ERROR_RATE",
    # Types
    "Move",
    "PayoffMatrix",
    "DEFAULT_PAYOFF_MATRIX",
    "GameHistory",
    "Strategy",
    "FunctionStrategy",
    "MatchResult",
    "create_random_source",
    # Payoff presets
    "PAYOFF_PRESETS",
    "get_payoff_preset",
    "list_payoff_presets",
    # Matches and strategies
    "play_match",
    "CLASSIC_STRATEGIES",
    "DEFAULT_STRATEGIES",
    "GeneticStrategy",
    "create_genetic_strategy",
    # Analytics
    "update_elo_rating",
    "process_elo_matches",
    "build_head_to_head_matrix",
    "summarize_results",
    "summarize_evolution",
    # Tournaments
    "TieBreaker",
    "SingleRoundRobin",
    "DoubleRoundRobin",
    "SwissFormat",
    "TournamentOutcome",
    "Tournament",
    "simulate_tournament",
    # Evolution
    "EvolutionSettings",
    "EvolutionSummary",
    "EvolutionHooks",
    "create_basic_evolution_engine",
    "get_evolution_settings_issues",
]
