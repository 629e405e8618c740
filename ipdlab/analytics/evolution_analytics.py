"""Metric series and totals across the generations of an evolution run."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

import polars as pl

if TYPE_CHECKING:
    from ..evolution.types import EvolutionSummary, GenerationSnapshot, PopulationIndividual


@dataclass
class EvolutionMetricPoint:
    """Metrics of one generation, flattened for plotting."""
    generation: int
    best_fitness: Optional[float]
    average_fitness: Optional[float]
    median_fitness: Optional[float]
    mutation_count: int
    crossover_count: int
    created_at: datetime


@dataclass
class EvolutionAnalytics:
    """Series and headline figures for an evolution run."""
    points: List[EvolutionMetricPoint] = field(default_factory=list)
    best_fitness: Optional[float] = None
    best_generation: Optional[int] = None
    best_individual: Optional["PopulationIndividual"] = None
    mutation_total: int = 0
    crossover_total: int = 0
    latest_point: Optional[EvolutionMetricPoint] = None

    @property
    def has_history(self) -> bool:
        return bool(self.points)


def _to_point(snapshot: "GenerationSnapshot") -> EvolutionMetricPoint:
    metrics = snapshot.metrics
    return EvolutionMetricPoint(
        generation=snapshot.generation,
        best_fitness=metrics.best_fitness,
        average_fitness=metrics.average_fitness,
        median_fitness=metrics.median_fitness,
        mutation_count=metrics.mutation_count or 0,
        crossover_count=metrics.crossover_count or 0,
        created_at=snapshot.created_at,
    )


def _find_best_individual(
    summary: "EvolutionSummary", best_generation: Optional[int]
) -> Optional["PopulationIndividual"]:
    if summary.best_individual is not None:
        return summary.best_individual
    if best_generation is None:
        return None
    for snapshot in summary.history:
        if snapshot.generation != best_generation:
            continue
        best_fitness = snapshot.metrics.best_fitness
        if best_fitness is None:
            return None
        for individual in snapshot.population:
            if individual.fitness is not None and individual.fitness >= best_fitness:
                return individual
    return None


def summarize_evolution(summary: Optional["EvolutionSummary"]) -> EvolutionAnalytics:
    """Collect the per-generation series and run totals.

    The best generation is the earliest one reaching the highest best
    fitness. Event totals add up the per-generation counts.

    Args:
        summary: Finished run, or None

    Returns:
        EvolutionAnalytics, empty when there is no history
    """
    if summary is None or not summary.history:
        return EvolutionAnalytics()

    points = [_to_point(snapshot) for snapshot in summary.history]

    best_point = None
    for point in points:
        if point.best_fitness is None:
            continue
        if best_point is None or best_point.best_fitness < point.best_fitness:
            best_point = point

    best_generation = best_point.generation if best_point is not None else None
    return EvolutionAnalytics(
        points=points,
        best_fitness=best_point.best_fitness if best_point is not None else None,
        best_generation=best_generation,
        best_individual=_find_best_individual(summary, best_generation),
        mutation_total=sum(point.mutation_count for point in points),
        crossover_total=sum(point.crossover_count for point in points),
        latest_point=points[-1],
    )


def evolution_history_frame(summary: Optional["EvolutionSummary"]) -> pl.DataFrame:
    """One row per generation with fitness statistics and event counts."""
    if summary is None or not summary.history:
        return pl.DataFrame()

    rows = [
        {
            "generation": point.generation,
            "best_fitness": point.best_fitness,
            "average_fitness": point.average_fitness,
            "median_fitness": point.median_fitness,
            "mutation_count": point.mutation_count,
            "crossover_count": point.crossover_count,
            "created_at": point.created_at,
        }
        for point in summarize_evolution(summary).points
    ]
    fitness_columns = {
        "best_fitness": pl.Float64,
        "average_fitness": pl.Float64,
        "median_fitness": pl.Float64,
    }
    return pl.DataFrame(rows, schema_overrides=fitness_columns).with_columns(
        pl.col("best_fitness").cum_max().alias("best_so_far"),
    )
