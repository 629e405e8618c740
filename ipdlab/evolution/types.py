"""Data model for evolutionary runs over genetic strategies."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from ..core.config import DEFAULT_TOURNAMENT_SELECTION_SIZE
from ..core.random import RandomSource, Seed
from ..core.types import PayoffMatrix
from ..experiments.tournament import TournamentFormat
from ..strategies.genetic import GeneticStrategyConfig, Genome, clone_genetic_config, ensure_gene_ids


class SelectionMethod(str, Enum):
    """How parents are chosen from the sorted population."""
    ROULETTE_WHEEL = "roulette-wheel"
    TOURNAMENT = "tournament"
    # rank and elitist both take the top two individuals
    RANK = "rank"
    ELITIST = "elitist"


class MutationOperator(str, Enum):
    """Mutation applied to offspring genomes."""
    BIT_FLIP = "bit-flip"
    GAUSSIAN = "gaussian"
    SWAP = "swap"


class CrossoverOperator(str, Enum):
    """Recombination applied to parent genomes."""
    SINGLE_POINT = "single-point"
    TWO_POINT = "two-point"
    UNIFORM = "uniform"


@dataclass
class EvolutionSettings:
    """Parameters of an evolutionary run.

    The engine uses these as given; call ``get_evolution_settings_issues``
    first to surface inconsistent values.
    """
    population_size: int = 12
    generations: int = 5
    selection_method: SelectionMethod = SelectionMethod.TOURNAMENT
    mutation_operator: MutationOperator = MutationOperator.BIT_FLIP
    crossover_operator: CrossoverOperator = CrossoverOperator.SINGLE_POINT
    mutation_rate: float = 0.1
    # None means every parent pair is crossed over
    crossover_rate: Optional[float] = 0.7
    elitism_count: int = 1
    tournament_size: Optional[int] = DEFAULT_TOURNAMENT_SELECTION_SIZE
    random_seed: Optional[Seed] = None
    profiling_enabled: bool = False


@dataclass
class FitnessOptions:
    """Tournament parameters for the default fitness evaluator."""
    rounds: Optional[int] = None
    error_rate: Optional[float] = None
    payoff_matrix: Optional[PayoffMatrix] = None
    format: Optional[TournamentFormat] = None


@dataclass
class PopulationIndividual:
    """One genome in the population.

    Only ``fitness`` changes after creation; each generation is made of
    new individuals.
    """
    id: str
    strategy_name: str
    config: GeneticStrategyConfig
    genome: Genome
    fitness: Optional[float] = None
    parent_ids: List[str] = field(default_factory=list)
    generation_introduced: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)


def clone_individual(individual: PopulationIndividual) -> PopulationIndividual:
    """Deep-copy an individual so later changes to the source individual never leak."""
    return replace(
        individual,
        config=clone_genetic_config(individual.config),
        genome=ensure_gene_ids(individual.genome),
        parent_ids=list(individual.parent_ids),
        metadata=dict(individual.metadata),
    )


@dataclass
class EvolutionMetrics:
    """Aggregates for one generation.

    Fitness statistics cover finite values only. Event counts are those of
    the reproduction step that produced the generation.
    """
    best_fitness: Optional[float]
    average_fitness: Optional[float]
    median_fitness: Optional[float]
    mutation_count: int
    crossover_count: int
    runtime_ms: Optional[float] = None


@dataclass
class EvolutionRuntimeMetrics:
    """Wall-clock profile of a run."""
    total_runtime_ms: float
    average_generation_ms: float
    generation_durations: List[float]


@dataclass
class GenerationSnapshot:
    """Frozen copy of a generation after fitness evaluation."""
    generation: int
    population: List[PopulationIndividual]
    metrics: EvolutionMetrics
    best_individual_id: Optional[str]
    created_at: datetime


@dataclass
class EvolutionSummary:
    """Result of a complete run."""
    best_individual: Optional[PopulationIndividual]
    final_population: List[PopulationIndividual]
    history: List[GenerationSnapshot]
    settings: EvolutionSettings
    runtime_metrics: Optional[EvolutionRuntimeMetrics] = None


@dataclass
class EvolutionContext:
    """State handed to hooks and fitness evaluators."""
    settings: EvolutionSettings
    generation: int
    random: RandomSource
    history: List[GenerationSnapshot]


EvaluateFitness = Callable[
    [PopulationIndividual, EvolutionContext],
    Union[Optional[float], Awaitable[Optional[float]]],
]


@dataclass
class EvolutionHooks:
    """Optional observers fired synchronously during a run.

    Hooks must not modify what they are given.
    """
    on_generation_start: Optional[Callable[[EvolutionContext], None]] = None
    on_generation_complete: Optional[Callable[[GenerationSnapshot], None]] = None
    on_mutation_applied: Optional[Callable[[PopulationIndividual], None]] = None
    on_crossover_applied: Optional[
        Callable[[List[PopulationIndividual], List[PopulationIndividual]], None]
    ] = None
