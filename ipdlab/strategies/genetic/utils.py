"""Gene id generation, cloning, and canonical forms for genomes."""

import random
from dataclasses import replace
from typing import Any, Callable, Dict, Optional

from ...core.random import RandomSource
from ...core.types import Move
from ...core.utils import to_base36
from .genome import Gene, GeneCondition, GeneId, GeneticStrategyConfig, Genome


class GeneIdGenerator:
    """Produces ``<prefix>-<counter>-<suffix>`` gene identifiers.

    Each generator owns its counter so separate engines or editors never
    share id state.
    """

    def __init__(self, prefix: str = "gene", random_source: Optional[RandomSource] = None):
        self.prefix = prefix
        self.random = random_source or random.random
        self._counter = 0

    def __call__(self) -> GeneId:
        self._counter += 1
        suffix = "".join(
            to_base36(int(self.random() * 36)) for _ in range(5)
        )
        return f"{self.prefix}-{to_base36(self._counter)}-{suffix}"


_default_generator = GeneIdGenerator()


def create_gene_id() -> GeneId:
    """Generate a gene id from the module default generator."""
    return _default_generator()


def clone_gene(gene: Gene) -> Gene:
    """Return a structurally equal copy of a gene."""
    return replace(gene, condition=replace(gene.condition))


def ensure_gene_ids(
    genome: Genome,
    generator: Callable[[], GeneId] = create_gene_id,
) -> Genome:
    """Copy a genome, assigning ids to genes that lack one.

    Args:
        genome: Genes to copy
        generator: Id factory used for missing ids

    Returns:
        New genome list
    """
    result = []
    for gene in genome:
        if gene.id:
            result.append(clone_gene(gene))
        else:
            result.append(replace(clone_gene(gene), id=generator()))
    return result


def clone_genetic_config(
    config: GeneticStrategyConfig,
    generator: Callable[[], GeneId] = create_gene_id,
) -> GeneticStrategyConfig:
    """Deep-copy a config, filling in missing gene ids from ``generator``."""
    return replace(config, genome=ensure_gene_ids(config.genome, generator))


def clone_genetic_config_map(
    configs: Dict[str, GeneticStrategyConfig],
) -> Dict[str, GeneticStrategyConfig]:
    """Clone every config in a name -> config mapping."""
    return {name: clone_genetic_config(config) for name, config in configs.items()}


def create_gene_template(
    condition: Optional[GeneCondition] = None,
    response: Optional[Move] = None,
    weight: Optional[float] = None,
    id: Optional[GeneId] = None,
    generator: Callable[[], GeneId] = create_gene_id,
) -> Gene:
    """Build a gene with defaults for anything not supplied.

    Defaults to an unconditional COOPERATE gene with a fresh id.
    """
    return Gene(
        condition=replace(condition) if condition is not None else GeneCondition(),
        response=Move(response) if response is not None else Move.COOPERATE,
        id=id or generator(),
        weight=weight,
    )


def canonicalize_gene(gene: Gene) -> Dict[str, Any]:
    """Render a gene as a plain dict with explicit None for absent fields."""
    condition = gene.condition
    return {
        "id": gene.id,
        "response": gene.response.value,
        "weight": gene.weight,
        "condition": {
            "opponent_last_move": condition.opponent_last_move.value
            if condition.opponent_last_move is not None else None,
            "self_last_move": condition.self_last_move.value
            if condition.self_last_move is not None else None,
            "round_range": list(condition.round_range)
            if condition.round_range is not None else None,
        },
    }


def canonicalize_config(config: GeneticStrategyConfig) -> Dict[str, Any]:
    """Render a config as plain, deterministic data for structural comparison."""
    return {
        "name": config.name,
        "description": config.description,
        "mutation_rate": config.mutation_rate,
        "crossover_rate": config.crossover_rate,
        "genome": [canonicalize_gene(gene) for gene in config.genome],
    }


def canonicalize_config_map(
    configs: Dict[str, GeneticStrategyConfig],
) -> Dict[str, Dict[str, Any]]:
    """Canonicalize every config in a mapping."""
    return {name: canonicalize_config(config) for name, config in configs.items()}


def genomes_equal(left: Genome, right: Genome) -> bool:
    """Compare two genomes gene by gene (id, response, weight, condition)."""
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))
