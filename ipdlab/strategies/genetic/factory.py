"""Build runnable strategies from genetic strategy configs."""

from typing import List

from ...core.types import GameHistory, Move
from .genome import Gene, GeneticStrategyConfig, Genome
from .utils import create_gene_template, ensure_gene_ids

# Returned when no gene matches so malformed genomes never lock into defection
FALLBACK_GENE = Gene(response=Move.COOPERATE)


def _matches(gene: Gene, history: GameHistory, round_number: int) -> bool:
    condition = gene.condition

    if condition.opponent_last_move is not None:
        if round_number == 0 or history.opponent_moves[round_number - 1] != condition.opponent_last_move:
            return False

    if condition.self_last_move is not None:
        if round_number == 0 or history.player_moves[round_number - 1] != condition.self_last_move:
            return False

    if condition.round_range is not None:
        start, end = condition.round_range
        if not start <= round_number + 1 <= end:
            return False

    return True


def select_gene(matches: List[Gene], history: GameHistory) -> Gene:
    """Pick one of the matching genes by weighted draw from the match source.

    Args:
        matches: Genes whose conditions hold this round
        history: Match history; its random source drives the draw

    Returns:
        The chosen gene, or a COOPERATE gene when nothing matched
    """
    if not matches:
        return FALLBACK_GENE
    if len(matches) == 1:
        return matches[0]

    weights = [gene.weight if gene.weight is not None else 1 for gene in matches]
    total_weight = sum(weights)
    if total_weight <= 0:
        return matches[0]

    threshold = history.random() * total_weight
    for gene, weight in zip(matches, weights):
        threshold -= weight
        if threshold <= 0:
            return gene

    return matches[-1]


class GeneticStrategy:
    """Strategy whose moves come from a fixed genome.

    The genome is copied with ids filled in at construction and never
    changes afterwards; evolve new configs with the operators instead.
    """

    def __init__(self, config: GeneticStrategyConfig):
        self.config = config
        self.name = config.name
        self.description = config.description
        if config.genome:
            self.genome: Genome = ensure_gene_ids(config.genome)
        else:
            self.genome = [create_gene_template()]

    def play(self, history: GameHistory, round_number: int) -> Move:
        matches = [gene for gene in self.genome if _matches(gene, history, round_number)]
        return select_gene(matches, history).response

    def __repr__(self) -> str:
        return f"GeneticStrategy(name={self.name!r}, genes={len(self.genome)})"


def create_genetic_strategy(config: GeneticStrategyConfig) -> GeneticStrategy:
    """Wrap a genetic config into a strategy usable by the tournament engine."""
    return GeneticStrategy(config)
