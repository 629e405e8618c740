"""Evolution of genetic strategies."""

from .types import (
    SelectionMethod,
    MutationOperator,
    CrossoverOperator,
    EvolutionSettings,
    FitnessOptions,
    PopulationIndividual,
    clone_individual,
    EvolutionMetrics,
    EvolutionRuntimeMetrics,
    GenerationSnapshot,
    EvolutionSummary,
    EvolutionContext,
    EvaluateFitness,
    EvolutionHooks,
)
from .engine import (
    BasicEvolutionEngine,
    create_basic_evolution_engine,
    run_champion_tournament,
)
from .settings import (
    get_evolution_settings_issues,
    build_strategies,
    build_strategy_map,
)

__all__ = [
    # Settings
    "SelectionMethod",
    "MutationOperator",
    "CrossoverOperator",
    "EvolutionSettings",
    "FitnessOptions",
    "get_evolution_settings_issues",
    # Population and results
    "PopulationIndividual",
    "clone_individual",
    "EvolutionMetrics",
    "EvolutionRuntimeMetrics",
    "GenerationSnapshot",
    "EvolutionSummary",
    # Engine
    "EvolutionContext",
    "EvaluateFitness",
    "EvolutionHooks",
    "BasicEvolutionEngine",
    "create_basic_evolution_engine",
    "run_champion_tournament",
    # Strategy pools
    "build_strategies",
    "build_strategy_map",
]
