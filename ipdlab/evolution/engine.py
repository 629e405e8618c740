"""Generational evolution of genetic strategies against a fixed opponent pool.

Each generation is evaluated (by default through a tournament against the
opponents), snapshotted, and then reproduced into the next generation
through elitism, parent selection, crossover, and mutation. Every draw
comes from one random source so a seeded run is reproducible.
"""

import inspect
import itertools
import logging
import math
import time
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.config import DEFAULT_FITNESS_ROUNDS, DEFAULT_TOURNAMENT_SELECTION_SIZE
from ..core.random import RandomSource, Seed, create_random_source
from ..core.types import DEFAULT_PAYOFF_MATRIX, PayoffMatrix, Strategy
from ..core.utils import finite_values, to_base36
from ..experiments.tournament import (
    DEFAULT_TOURNAMENT_FORMAT,
    Tournament,
    TournamentFormat,
    TournamentOutcome,
)
from ..strategies.genetic import (
    GeneIdGenerator,
    GeneticStrategyConfig,
    Genome,
    bit_flip_mutation,
    clone_genetic_config,
    create_genetic_strategy,
    ensure_gene_ids,
    gaussian_mutation,
    genomes_equal,
    single_point_crossover,
    swap_mutation,
    two_point_crossover,
    uniform_crossover,
)
from .types import (
    CrossoverOperator,
    EvaluateFitness,
    EvolutionContext,
    EvolutionHooks,
    EvolutionMetrics,
    EvolutionRuntimeMetrics,
    EvolutionSettings,
    EvolutionSummary,
    FitnessOptions,
    GenerationSnapshot,
    MutationOperator,
    PopulationIndividual,
    SelectionMethod,
    clone_individual,
)

logger = logging.getLogger(__name__)

MIN_TOURNAMENT_SIZE = 2


def _fitness_key(individual: PopulationIndividual) -> float:
    # missing and NaN fitness rank below everything
    fitness = individual.fitness
    if fitness is None or (isinstance(fitness, float) and math.isnan(fitness)):
        return -math.inf
    return fitness


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class BasicEvolutionEngine:
    """Evolves a population seeded from genetic strategy configs.

    Individual and gene ids come from generators owned by the engine, so
    separate engines never share id state and a seeded run repeats its ids.
    """

    def __init__(
        self,
        settings: EvolutionSettings,
        seed_pool: Sequence[GeneticStrategyConfig],
        opponents: Sequence[Strategy],
        hooks: Optional[EvolutionHooks] = None,
        fitness: Optional[FitnessOptions] = None,
    ):
        if not seed_pool:
            logger.debug("Refusing evolution engine without seed configs")
            raise ValueError("Evolution engine requires at least one seed genetic strategy config.")
        if len(opponents) < MIN_TOURNAMENT_SIZE - 1:
            logger.debug("Refusing evolution engine without opponents")
            raise ValueError("Evolution engine requires at least one opponent strategy.")

        self.settings = settings
        self.seed_pool = list(seed_pool)
        self.opponents = list(opponents)
        self.hooks = hooks or EvolutionHooks()
        self.fitness = fitness or FitnessOptions()
        self._tournament = Tournament()
        self._ids = itertools.count(1)
        seed = settings.random_seed
        # separate stream; filling gene ids never consumes evolution draws
        self._gene_ids = GeneIdGenerator(
            random_source=create_random_source(f"{seed}:gene-ids") if seed is not None else None
        )

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{to_base36(next(self._ids))}"

    def initialize_population(self) -> List[PopulationIndividual]:
        """Fill the population round-robin from the seed pool.

        Each seed config is cloned and pre-mutated with bit-flip mutation at
        half the configured rate.

        Returns:
            Fresh individuals for generation 0
        """
        random = create_random_source(self.settings.random_seed)
        population = []
        for index in range(self.settings.population_size):
            base_config = clone_genetic_config(
                self.seed_pool[index % len(self.seed_pool)], generator=self._gene_ids
            )
            genome = base_config.genome
            if self.settings.mutation_rate > 0:
                genome = bit_flip_mutation(
                    genome, mutation_rate=self.settings.mutation_rate / 2, random=random
                )
            config = replace(base_config, genome=genome)
            id = self._next_id("seed")
            population.append(PopulationIndividual(
                id=id,
                strategy_name=f"{config.name} #{id}",
                config=config,
                genome=genome,
            ))
        return population

    def _evaluate_in_tournament(
        self, individual: PopulationIndividual, context: EvolutionContext
    ) -> float:
        """Score an individual by its total in a tournament against the opponents."""
        strategy = create_genetic_strategy(
            replace(individual.config, genome=individual.genome, name=individual.strategy_name)
        )
        fitness = self.fitness
        outcome = self._tournament.run_with_format(
            fitness.format if fitness.format is not None else DEFAULT_TOURNAMENT_FORMAT,
            [strategy, *self.opponents],
            fitness.rounds if fitness.rounds is not None else DEFAULT_FITNESS_ROUNDS,
            fitness.error_rate if fitness.error_rate is not None else 0.0,
            fitness.payoff_matrix if fitness.payoff_matrix is not None else DEFAULT_PAYOFF_MATRIX,
            self.settings.random_seed,
        )
        for result in outcome.results:
            if result.name == individual.strategy_name:
                return result.total_score
        return 0.0

    async def run(
        self,
        evaluate_fitness: Optional[EvaluateFitness] = None,
        initial_population: Optional[Sequence[PopulationIndividual]] = None,
    ) -> EvolutionSummary:
        """Run every generation and summarize.

        Fitness is evaluated one individual at a time in population order;
        awaitable results are awaited before the next evaluation starts.

        Args:
            evaluate_fitness: Custom evaluator, sync or async. Defaults to a
                tournament against the opponent pool.
            initial_population: Generation 0 to start from instead of the seed pool

        Returns:
            EvolutionSummary with the best individual and full history
        """
        random = create_random_source(self.settings.random_seed)
        evaluate = evaluate_fitness or self._evaluate_in_tournament

        if initial_population:
            population = [clone_individual(individual) for individual in initial_population]
        else:
            population = self.initialize_population()

        history: List[GenerationSnapshot] = []
        best_individual: Optional[PopulationIndividual] = None
        mutation_events = 0
        crossover_events = 0
        profiling = bool(self.settings.profiling_enabled)
        run_start = time.perf_counter()
        generation_durations: List[float] = []

        for generation in range(self.settings.generations):
            generation_start = time.perf_counter()
            context = EvolutionContext(
                settings=self.settings,
                generation=generation,
                random=random,
                history=history,
            )
            if self.hooks.on_generation_start:
                self.hooks.on_generation_start(context)

            for individual in population:
                value = evaluate(individual, context)
                if inspect.isawaitable(value):
                    value = await value
                individual.fitness = value

            metrics = self._compute_metrics(population, mutation_events, crossover_events)
            if profiling:
                metrics.runtime_ms = (time.perf_counter() - generation_start) * 1000
                generation_durations.append(metrics.runtime_ms)

            best = self._pick_best(population)
            if best is not None and (
                best_individual is None or _fitness_key(best_individual) < _fitness_key(best)
            ):
                best_individual = clone_individual(best)

            snapshot = GenerationSnapshot(
                generation=generation,
                population=[clone_individual(individual) for individual in population],
                metrics=metrics,
                best_individual_id=best.id if best is not None else None,
                created_at=datetime.now(timezone.utc),
            )
            history.append(snapshot)
            logger.debug(
                "Generation %d: best=%s average=%s mutations=%d crossovers=%d",
                generation, metrics.best_fitness, metrics.average_fitness,
                metrics.mutation_count, metrics.crossover_count,
            )
            if self.hooks.on_generation_complete:
                self.hooks.on_generation_complete(snapshot)

            if generation == self.settings.generations - 1:
                break

            population, mutation_events, crossover_events = self._produce_next_generation(
                population, generation, random
            )

        runtime_metrics = None
        if profiling:
            runtime_metrics = EvolutionRuntimeMetrics(
                total_runtime_ms=(time.perf_counter() - run_start) * 1000,
                average_generation_ms=(
                    sum(generation_durations) / len(generation_durations)
                    if generation_durations else 0.0
                ),
                generation_durations=generation_durations,
            )

        return EvolutionSummary(
            best_individual=best_individual,
            final_population=[clone_individual(individual) for individual in population],
            history=history,
            settings=self.settings,
            runtime_metrics=runtime_metrics,
        )

    @staticmethod
    def _compute_metrics(
        population: List[PopulationIndividual], mutation_events: int, crossover_events: int
    ) -> EvolutionMetrics:
        values = finite_values(individual.fitness for individual in population)
        if not values:
            return EvolutionMetrics(None, None, None, mutation_events, crossover_events)
        return EvolutionMetrics(
            best_fitness=max(values),
            average_fitness=float(np.mean(values)),
            # upper median for even counts
            median_fitness=sorted(values)[len(values) // 2],
            mutation_count=mutation_events,
            crossover_count=crossover_events,
        )

    @staticmethod
    def _pick_best(population: List[PopulationIndividual]) -> Optional[PopulationIndividual]:
        """Fittest individual with a finite fitness, earliest on ties."""
        best = None
        for candidate in population:
            if not finite_values([candidate.fitness]):
                continue
            if best is None or best.fitness < candidate.fitness:
                best = candidate
        return best

    def _produce_next_generation(
        self,
        population: List[PopulationIndividual],
        generation: int,
        random: RandomSource,
    ) -> Tuple[List[PopulationIndividual], int, int]:
        ranked = sorted(population, key=_fitness_key, reverse=True)
        next_population: List[PopulationIndividual] = []
        mutation_events = 0
        crossover_events = 0

        for elite in ranked[:min(self.settings.elitism_count, len(ranked))]:
            next_population.append(replace(
                clone_individual(elite),
                id=self._next_id("elite"),
                parent_ids=[elite.id],
                generation_introduced=generation + 1,
                fitness=None,
            ))

        crossover_rate = self.settings.crossover_rate
        crossover_rate = _clamp(1.0 if crossover_rate is None else crossover_rate, 0.0, 1.0)

        while len(next_population) < self.settings.population_size:
            parents = self._select_parents(ranked, random)
            should_crossover = crossover_rate > 0 and random() < crossover_rate
            if should_crossover:
                offspring = self._crossover(parents, random)
                crossover_events += 1
            else:
                offspring = [ensure_gene_ids(parent.genome, self._gene_ids) for parent in parents]

            for genome in offspring:
                if len(next_population) >= self.settings.population_size:
                    break
                mutated_genome, mutated = self._apply_mutation(genome, random)
                if mutated:
                    mutation_events += 1
                seed_parent = parents[0 if random() < 0.5 else 1]
                config = replace(
                    clone_genetic_config(seed_parent.config, generator=self._gene_ids),
                    genome=mutated_genome,
                )
                id = self._next_id("child")
                child = PopulationIndividual(
                    id=id,
                    strategy_name=f"{config.name} #{id}",
                    config=config,
                    genome=mutated_genome,
                    parent_ids=[parent.id for parent in parents],
                    generation_introduced=generation + 1,
                )
                next_population.append(child)
                if mutated and self.hooks.on_mutation_applied:
                    self.hooks.on_mutation_applied(child)

        return next_population, mutation_events, crossover_events

    def _select_parents(
        self, population: List[PopulationIndividual], random: RandomSource
    ) -> List[PopulationIndividual]:
        method = self.settings.selection_method
        if method == SelectionMethod.ROULETTE_WHEEL:
            return [self._roulette_wheel(population, random), self._roulette_wheel(population, random)]
        if method == SelectionMethod.TOURNAMENT:
            return [self._tournament_select(population, random), self._tournament_select(population, random)]
        # rank and elitist: the two fittest
        return [population[0], population[1] if len(population) > 1 else population[0]]

    @staticmethod
    def _roulette_wheel(
        population: List[PopulationIndividual], random: RandomSource
    ) -> PopulationIndividual:
        """Draw proportionally to fitness shifted so the minimum weighs 1."""
        values = [
            individual.fitness if finite_values([individual.fitness]) else 0.0
            for individual in population
        ]
        lowest = min(values)
        adjusted = [value - lowest + 1 for value in values]
        threshold = random() * sum(adjusted)
        for individual, weight in zip(population, adjusted):
            threshold -= weight
            if threshold <= 0:
                return individual
        return population[-1]

    def _tournament_select(
        self, population: List[PopulationIndividual], random: RandomSource
    ) -> PopulationIndividual:
        """Keep the fittest of distinct, uniformly sampled competitors.

        The competitor count is clamped into [2, len(population)].

        Raises:
            ValueError: If the population is empty
        """
        if not population:
            raise ValueError("Cannot perform tournament selection on an empty population.")
        requested = self.settings.tournament_size
        if requested is None:
            requested = DEFAULT_TOURNAMENT_SELECTION_SIZE
        size = min(len(population), max(requested, MIN_TOURNAMENT_SIZE))

        competitors: List[PopulationIndividual] = []
        while len(competitors) < size:
            candidate = population[int(random() * len(population))]
            if not any(candidate is competitor for competitor in competitors):
                competitors.append(candidate)

        best = competitors[0]
        for candidate in competitors[1:]:
            if _fitness_key(candidate) > _fitness_key(best):
                best = candidate
        return best

    def _crossover(
        self, parents: List[PopulationIndividual], random: RandomSource
    ) -> List[Genome]:
        parent_a, parent_b = parents
        operator = self.settings.crossover_operator
        if operator == CrossoverOperator.TWO_POINT:
            child_a, child_b = two_point_crossover(parent_a.genome, parent_b.genome, random=random)
        elif operator == CrossoverOperator.UNIFORM:
            child_a, child_b = uniform_crossover(parent_a.genome, parent_b.genome, random=random)
        else:
            child_a, child_b = single_point_crossover(parent_a.genome, parent_b.genome, random=random)

        if self.hooks.on_crossover_applied:
            self.hooks.on_crossover_applied(
                list(parents),
                [replace(parent_a, genome=child_a), replace(parent_b, genome=child_b)],
            )
        return [child_a, child_b]

    def _apply_mutation(self, genome: Genome, random: RandomSource) -> Tuple[Genome, bool]:
        """Mutate with the configured operator; report whether anything changed."""
        normalized = ensure_gene_ids(genome, self._gene_ids)
        if self.settings.mutation_rate <= 0:
            return normalized, False

        mutation_rate = _clamp(self.settings.mutation_rate, 0.0, 1.0)
        operator = self.settings.mutation_operator
        if operator == MutationOperator.SWAP:
            mutated = swap_mutation(normalized, mutation_rate=mutation_rate, random=random)
        elif operator == MutationOperator.GAUSSIAN:
            mutated = gaussian_mutation(normalized, mutation_rate=mutation_rate, random=random)
        else:
            mutated = bit_flip_mutation(normalized, mutation_rate=mutation_rate, random=random)
        return mutated, not genomes_equal(normalized, mutated)


def create_basic_evolution_engine(
    settings: EvolutionSettings,
    seed_pool: Sequence[GeneticStrategyConfig],
    opponents: Sequence[Strategy],
    hooks: Optional[EvolutionHooks] = None,
    fitness: Optional[FitnessOptions] = None,
) -> BasicEvolutionEngine:
    """Build an evolution engine.

    Raises:
        ValueError: If the seed pool or the opponent list is empty
    """
    return BasicEvolutionEngine(settings, seed_pool, opponents, hooks, fitness)


def run_champion_tournament(
    summary: EvolutionSummary,
    opponents: Sequence[Strategy],
    rounds: int = DEFAULT_FITNESS_ROUNDS,
    error_rate: float = 0.0,
    payoff_matrix: PayoffMatrix = DEFAULT_PAYOFF_MATRIX,
    seed: Optional[Seed] = None,
    format: Optional[TournamentFormat] = None,
) -> Optional[TournamentOutcome]:
    """Play the run's best individual against the opponent pool.

    Falls back to the first individual of the final population when no
    individual was ever scored.

    Args:
        summary: Finished evolution run
        opponents: Strategies to face
        rounds: Rounds per match
        error_rate: Per-move noise probability
        payoff_matrix: Reward table
        seed: Optional seed for the tournament
        format: Tournament format; defaults to single round-robin

    Returns:
        TournamentOutcome, or None when the run has no individuals
    """
    champion = summary.best_individual
    if champion is None and summary.final_population:
        champion = summary.final_population[0]
    if champion is None:
        return None

    strategy = create_genetic_strategy(
        replace(champion.config, genome=champion.genome, name=champion.strategy_name)
    )
    logger.debug("Champion %s enters the final tournament", champion.strategy_name)
    return Tournament().run_with_format(
        format if format is not None else DEFAULT_TOURNAMENT_FORMAT,
        [strategy, *opponents],
        rounds,
        error_rate,
        payoff_matrix,
        seed,
    )
