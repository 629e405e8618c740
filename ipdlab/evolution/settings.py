"""Advisory validation of evolution settings and strategy pool helpers."""

import math
import numbers
from typing import Dict, List, Mapping, Sequence

from ..core.types import Strategy
from ..strategies.genetic import GeneticStrategyConfig, create_genetic_strategy
from .types import EvolutionSettings, SelectionMethod


def _is_finite(value) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def get_evolution_settings_issues(settings: EvolutionSettings) -> List[str]:
    """List problems with a settings object.

    The engine never rejects settings itself; callers check this first.

    Args:
        settings: Settings to check

    Returns:
        Human-readable issues, empty when the settings are consistent
    """
    issues = []
    if not _is_finite(settings.population_size) or settings.population_size < 2:
        issues.append("Population size must be at least 2.")
    if not _is_finite(settings.generations) or settings.generations < 1:
        issues.append("Generations must be at least 1.")
    if not _is_finite(settings.elitism_count) or settings.elitism_count < 0:
        issues.append("Elitism count cannot be negative.")
    elif _is_finite(settings.population_size) and settings.elitism_count >= settings.population_size:
        issues.append("Elitism count must be less than population size.")
    if not _is_finite(settings.mutation_rate) or not 0 <= settings.mutation_rate <= 1:
        issues.append("Mutation rate must be between 0 and 1.")
    crossover_rate = settings.crossover_rate
    if crossover_rate is not None and (not _is_finite(crossover_rate) or not 0 <= crossover_rate <= 1):
        issues.append("Crossover rate must be between 0 and 1.")
    if settings.selection_method == SelectionMethod.TOURNAMENT:
        size = settings.tournament_size if settings.tournament_size is not None else 0
        if not _is_finite(size) or size < 2:
            issues.append("Tournament size must be at least 2.")
        elif _is_finite(settings.population_size) and size > settings.population_size:
            issues.append("Tournament size cannot exceed population size.")
    return issues


def build_strategies(
    base: Sequence[Strategy],
    configs: Mapping[str, GeneticStrategyConfig],
) -> List[Strategy]:
    """Append a genetic strategy per config to the base strategies."""
    return [*base, *(create_genetic_strategy(config) for config in configs.values())]


def build_strategy_map(strategies: Sequence[Strategy]) -> Dict[str, Strategy]:
    """Index strategies by name; later duplicates win."""
    return {strategy.name: strategy for strategy in strategies}
