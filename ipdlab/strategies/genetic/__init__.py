"""Rule-based genetic strategies: genomes, operators, and the strategy factory."""

from .genome import (
    GeneId,
    RoundRange,
    GeneCondition,
    Gene,
    Genome,
    GeneticStrategyConfig,
)
from .utils import (
    GeneIdGenerator,
    create_gene_id,
    clone_gene,
    ensure_gene_ids,
    clone_genetic_config,
    clone_genetic_config_map,
    create_gene_template,
    canonicalize_gene,
    canonicalize_config,
    canonicalize_config_map,
    genomes_equal,
)
from .operators import (
    mutate_genome,
    bit_flip_mutation,
    gaussian_mutation,
    swap_mutation,
    single_point_crossover,
    two_point_crossover,
    uniform_crossover,
)
from .factory import (
    GeneticStrategy,
    create_genetic_strategy,
    select_gene,
)
from .introductory import (
    INTRODUCTORY_GENETIC_CONFIG,
    GENETIC_STRATEGY_CONFIGS,
    introductory_genetic,
)

__all__ = [
    # Genome model
    "GeneId",
    "RoundRange",
    "GeneCondition",
    "Gene",
    "Genome",
    "GeneticStrategyConfig",
    # Utilities
    "GeneIdGenerator",
    "create_gene_id",
    "clone_gene",
    "ensure_gene_ids",
    "clone_genetic_config",
    "clone_genetic_config_map",
    "create_gene_template",
    "canonicalize_gene",
    "canonicalize_config",
    "canonicalize_config_map",
    "genomes_equal",
    # Operators
    "mutate_genome",
    "bit_flip_mutation",
    "gaussian_mutation",
    "swap_mutation",
    "single_point_crossover",
    "two_point_crossover",
    "uniform_crossover",
    # Strategy factory
    "GeneticStrategy",
    "create_genetic_strategy",
    "select_gene",
    "INTRODUCTORY_GENETIC_CONFIG",
    "GENETIC_STRATEGY_CONFIGS",
    "introductory_genetic",
]
