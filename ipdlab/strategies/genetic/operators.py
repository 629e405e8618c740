"""Mutation and crossover operators for genomes.

Every operator returns new genome lists and never modifies its inputs.
Randomness comes from an injected source so seeded runs are reproducible;
each operator consumes draws in a fixed order.
"""

import math
from dataclasses import replace
from random import random as default_random
from typing import Optional, Tuple

from ...core.config import DEFAULT_MUTATION_RATE
from ...core.random import RandomSource
from ...core.types import Move
from ...core.utils import round_half_up
from .genome import Gene, Genome
from .utils import clone_gene

MOVES = (Move.COOPERATE, Move.DEFECT)

# Chance a set move condition is dropped rather than flipped
CONDITION_DROP_PROBABILITY = 0.33
WEIGHT_STEP = 0.25
GAUSSIAN_WEIGHT_SIGMA = 0.25
MIN_WEIGHT = 0.1


def _clone_genome(genome: Genome) -> Genome:
    return [clone_gene(gene) for gene in genome]


def _pick_different_move(current: Move, random: RandomSource) -> Move:
    candidate = current
    while candidate == current:
        candidate = MOVES[int(random() * len(MOVES))]
    return candidate


def _mutate_move_condition(current: Optional[Move], random: RandomSource) -> Optional[Move]:
    if current is None:
        if random() < 0.5:
            return None
        return MOVES[int(random() * len(MOVES))]
    if random() < CONDITION_DROP_PROBABILITY:
        return None
    return _pick_different_move(current, random)


def _mutate_gene(gene: Gene, mutation_rate: float, random: RandomSource) -> Gene:
    response = gene.response
    opponent_last_move = gene.condition.opponent_last_move
    self_last_move = gene.condition.self_last_move
    round_range = gene.condition.round_range
    weight = gene.weight

    if random() < mutation_rate:
        response = _pick_different_move(response, random)

    if random() < mutation_rate:
        opponent_last_move = _mutate_move_condition(opponent_last_move, random)

    if random() < mutation_rate:
        self_last_move = _mutate_move_condition(self_last_move, random)

    if random() < mutation_rate and round_range is not None:
        start, end = round_range
        shift = -1 if random() < 0.5 else 1
        round_range = (max(1, start + shift), max(start + shift, end + shift))
    elif random() < mutation_rate:
        round_range = None

    if weight is not None and random() < mutation_rate:
        delta = -WEIGHT_STEP if random() < 0.5 else WEIGHT_STEP
        weight = max(MIN_WEIGHT, round_half_up(weight + delta, 2))

    return Gene(
        condition=replace(
            gene.condition,
            opponent_last_move=opponent_last_move,
            self_last_move=self_last_move,
            round_range=round_range,
        ),
        response=response,
        id=gene.id,
        weight=weight,
    )


def mutate_genome(
    genome: Genome,
    mutation_rate: float = DEFAULT_MUTATION_RATE,
    random: RandomSource = default_random,
) -> Genome:
    """Mutate responses, conditions, round ranges, and weights gene by gene.

    Per gene, each of the following happens independently with probability
    ``mutation_rate``: the response flips; the opponent and self last-move
    conditions are set, dropped, or flipped; the round range shifts by one
    (start clamped to 1) or is dropped; a set weight moves by 0.25 (floor 0.1).

    Args:
        genome: Genes to mutate
        mutation_rate: Per-mutation probability in [0, 1]
        random: Random source

    Returns:
        A new genome, equal to the input when ``mutation_rate`` is 0
    """
    return [_mutate_gene(gene, mutation_rate, random) for gene in genome]


def bit_flip_mutation(
    genome: Genome,
    mutation_rate: float = DEFAULT_MUTATION_RATE,
    random: RandomSource = default_random,
) -> Genome:
    """Flip each gene's response with probability ``mutation_rate``."""
    result = []
    for gene in genome:
        if random() < mutation_rate:
            result.append(replace(clone_gene(gene), response=gene.response.opposite))
        else:
            result.append(clone_gene(gene))
    return result


def _standard_normal(random: RandomSource) -> float:
    # Box-Muller transform on two uniform draws
    u1 = max(random(), 1e-12)
    u2 = random()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def gaussian_mutation(
    genome: Genome,
    mutation_rate: float = DEFAULT_MUTATION_RATE,
    random: RandomSource = default_random,
) -> Genome:
    """Perturb gene weights with normally distributed noise.

    Genes without a weight are treated as weight 1. Resulting weights are
    rounded to two decimals and never drop below 0.1.
    """
    result = []
    for gene in genome:
        if random() < mutation_rate:
            base = gene.weight if gene.weight is not None else 1.0
            noise = _standard_normal(random) * GAUSSIAN_WEIGHT_SIGMA
            weight = max(MIN_WEIGHT, round_half_up(base + noise, 2))
            result.append(replace(clone_gene(gene), weight=weight))
        else:
            result.append(clone_gene(gene))
    return result


def swap_mutation(
    genome: Genome,
    mutation_rate: float = DEFAULT_MUTATION_RATE,
    random: RandomSource = default_random,
) -> Genome:
    """Swap two distinct gene positions with probability ``mutation_rate``.

    Gene order matters only through weighted selection, so this mainly
    reshuffles which genes crossover will exchange later.
    """
    clone = _clone_genome(genome)
    if len(clone) < 2:
        return clone
    if random() >= mutation_rate:
        return clone

    index_a = int(random() * len(clone))
    index_b = int(random() * len(clone))
    while index_b == index_a:
        index_b = int(random() * len(clone))

    clone[index_a], clone[index_b] = clone[index_b], clone[index_a]
    return clone


def single_point_crossover(
    left: Genome,
    right: Genome,
    random: RandomSource = default_random,
) -> Tuple[Genome, Genome]:
    """Exchange genome tails after one cut point.

    The cut is drawn from ``[1, min(len(left), len(right)) - 1]`` and is never
    below 1. Empty parents come back swapped.

    Args:
        left: First parent genome
        right: Second parent genome
        random: Random source

    Returns:
        Tuple of (left head + right tail, right head + left tail)
    """
    if not left or not right:
        return _clone_genome(right), _clone_genome(left)

    max_cut = min(len(left), len(right)) - 1
    cut = max(1, int(random() * (max_cut + 1)))

    return (
        _clone_genome(left[:cut] + right[cut:]),
        _clone_genome(right[:cut] + left[cut:]),
    )


def two_point_crossover(
    left: Genome,
    right: Genome,
    random: RandomSource = default_random,
) -> Tuple[Genome, Genome]:
    """Exchange the segment between two distinct cut points."""
    if not left or not right:
        return _clone_genome(right), _clone_genome(left)

    min_length = min(len(left), len(right))
    if min_length < 2:
        return single_point_crossover(left, right, random)

    cut_a = int(random() * (min_length - 1)) + 1
    cut_b = int(random() * (min_length - 1)) + 1
    if cut_a == cut_b:
        cut_b = 2 if cut_a == 1 else cut_a - 1
    start, end = min(cut_a, cut_b), max(cut_a, cut_b)

    child_a = left[:start] + right[start:end] + left[end:]
    child_b = right[:start] + left[start:end] + right[end:]
    return _clone_genome(child_a), _clone_genome(child_b)


def uniform_crossover(
    left: Genome,
    right: Genome,
    random: RandomSource = default_random,
) -> Tuple[Genome, Genome]:
    """Swap genes position by position on a fair coin (draw >= 0.5 swaps)."""
    if not left or not right:
        return _clone_genome(right), _clone_genome(left)

    child_a = _clone_genome(left)
    child_b = _clone_genome(right)
    for index in range(min(len(child_a), len(child_b))):
        if random() < 0.5:
            continue
        child_a[index], child_b[index] = child_b[index], child_a[index]
    return child_a, child_b
