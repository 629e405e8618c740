"""Tests for genetic mutation and crossover operators."""

import itertools

from ...core.types import Move
from .genome import Gene, GeneCondition
from .operators import (
    bit_flip_mutation,
    gaussian_mutation,
    mutate_genome,
    single_point_crossover,
    swap_mutation,
    two_point_crossover,
    uniform_crossover,
)

C = Move.COOPERATE
D = Move.DEFECT


def gene(id, response=C, **condition):
    return Gene(condition=GeneCondition(**condition), response=response, id=id)


class TestMutateGenome:
    """Tests for the full genome mutator."""

    def test_zero_rate_returns_equal_copy(self):
        genome = [gene("g-1"), gene("g-2", D, opponent_last_move=D)]
        mutated = mutate_genome(genome, mutation_rate=0, random=lambda: 0)
        assert mutated is not genome
        assert mutated == genome

    def test_response_flips_when_draw_below_rate(self, sequence_random):
        genome = [gene("g-3")]
        mutated = mutate_genome(
            genome, mutation_rate=1, random=sequence_random([0.1, 0.9, 0.9, 0.9, 0.9])
        )
        assert mutated[0].response is D

    def test_conditions_removed(self, sequence_random):
        genome = [gene("g-4", C, opponent_last_move=C, self_last_move=D, round_range=(2, 3))]
        mutated = mutate_genome(
            genome,
            mutation_rate=0.5,
            random=sequence_random([0.9, 0.4, 0.2, 0.4, 0.2, 0.6, 0.4]),
        )
        assert mutated[0].condition == GeneCondition()
        assert mutated[0].id == "g-4"

    def test_round_range_shift_keeps_start_at_one(self, sequence_random):
        genome = [gene("g-5", round_range=(1, 2))]
        # response, opponent, self gates miss; range gate hits; shift draw picks -1
        mutated = mutate_genome(
            genome, mutation_rate=0.5, random=sequence_random([0.9, 0.9, 0.9, 0.1, 0.1])
        )
        assert mutated[0].condition.round_range == (1, 1)

    def test_weight_nudged_with_floor(self, sequence_random):
        genome = [Gene(response=C, id="g-6", weight=0.2)]
        # skip response/opponent/self/range/drop, then weight gate and a -0.25 step
        mutated = mutate_genome(
            genome,
            mutation_rate=0.5,
            random=sequence_random([0.9, 0.9, 0.9, 0.9, 0.9, 0.1, 0.1]),
        )
        assert mutated[0].weight == 0.1

    def test_input_untouched(self):
        genome = [gene("g-7", C, opponent_last_move=D)]
        mutate_genome(genome, mutation_rate=1, random=itertools.cycle([0.1, 0.9]).__next__)
        assert genome == [gene("g-7", C, opponent_last_move=D)]


class TestBitFlipMutation:
    """Tests for bit_flip_mutation."""

    def test_flips_with_configured_probability(self, sequence_random):
        genome = [gene("b-1", C), gene("b-2", D)]
        mutated = bit_flip_mutation(genome, mutation_rate=0.5, random=sequence_random([0.4, 0.6]))
        assert mutated[0].response is D
        assert mutated[1].response is D


class TestGaussianMutation:
    """Tests for gaussian_mutation."""

    def test_perturbs_weight(self, sequence_random):
        genome = [Gene(response=C, id="g-1", weight=1)]
        mutated = gaussian_mutation(
            genome, mutation_rate=1, random=sequence_random([0.1, 0.2, 0.3, 0.4, 0.5, 0.6])
        )
        assert mutated[0].weight != 1
        assert mutated[0].weight >= 0.1

    def test_missing_gate_keeps_gene(self):
        genome = [Gene(response=C, id="g-1")]
        assert gaussian_mutation(genome, mutation_rate=0.5, random=lambda: 0.9) == genome


class TestSwapMutation:
    """Tests for swap_mutation."""

    def test_swaps_two_genes(self, sequence_random):
        genome = [gene("g-1"), gene("g-2", D), gene("g-3")]
        mutated = swap_mutation(genome, mutation_rate=0.5, random=sequence_random([0.4, 0.1, 0.7]))
        assert [g.id for g in mutated] == ["g-3", "g-2", "g-1"]

    def test_untriggered_swap_copies(self):
        genome = [gene("g-1"), gene("g-2", D)]
        mutated = swap_mutation(genome, mutation_rate=0.1, random=lambda: 0.9)
        assert mutated == genome
        assert mutated is not genome

    def test_single_gene_copied(self):
        genome = [gene("g-1")]
        assert swap_mutation(genome, mutation_rate=1, random=lambda: 0.0) == genome


class TestSinglePointCrossover:
    """Tests for single_point_crossover."""

    def test_swaps_tails_after_cut(self):
        left = [gene("l-1", D, self_last_move=C), gene("l-2"), gene("l-3", D, opponent_last_move=D)]
        right = [gene("r-1"), gene("r-2", C, opponent_last_move=C), gene("r-3", C, opponent_last_move=D)]

        child_a, child_b = single_point_crossover(left, right, random=lambda: 0.4)

        assert child_a == [left[0], right[1], right[2]]
        assert child_b == [right[0], left[1], left[2]]

    def test_short_genomes(self):
        child_a, child_b = single_point_crossover([gene("a-1")], [gene("b-1", D)])
        assert len(child_a) == 1
        assert len(child_b) == 1

    def test_empty_parent_returns_swapped_copies(self):
        left = [gene("l-1")]
        child_a, child_b = single_point_crossover(left, [], random=lambda: 0.5)
        assert child_a == []
        assert child_b == left


class TestTwoPointCrossover:
    """Tests for two_point_crossover."""

    def test_exchanges_middle_segment(self, sequence_random):
        left = [gene("l-1", C), gene("l-2", D), gene("l-3", C), gene("l-4", D)]
        right = [gene("r-1", D), gene("r-2", C), gene("r-3", D), gene("r-4", C)]

        child_a, child_b = two_point_crossover(left, right, random=sequence_random([0.2, 0.8]))

        assert child_a == [left[0], right[1], right[2], left[3]]
        assert child_b == [right[0], left[1], left[2], right[3]]

    def test_equal_cuts_are_separated(self):
        left = [gene("l-1"), gene("l-2"), gene("l-3")]
        right = [gene("r-1", D), gene("r-2", D), gene("r-3", D)]
        # both cuts land on 1, so the second moves to 2
        child_a, _ = two_point_crossover(left, right, random=lambda: 0.1)
        assert [g.id for g in child_a] == ["l-1", "r-2", "l-3"]


class TestUniformCrossover:
    """Tests for uniform_crossover."""

    def test_swaps_genes_per_position(self, sequence_random):
        left = [gene("l-1", C), gene("l-2", D)]
        right = [gene("r-1", D), gene("r-2", C)]

        child_a, child_b = uniform_crossover(left, right, random=sequence_random([0.9, 0.1]))

        assert child_a[0] == right[0]
        assert child_b[0] == left[0]
        assert child_a[1] == left[1]
        assert child_b[1] == right[1]
