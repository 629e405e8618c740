"""Hand-tuned starter genome shipped with the default strategy pool."""

from ...core.types import Move
from .factory import create_genetic_strategy
from .genome import Gene, GeneCondition, GeneticStrategyConfig

INTRODUCTORY_GENETIC_CONFIG = GeneticStrategyConfig(
    name="Genetic Adaptive Starter",
    description=(
        "Genome opens with cooperation, punishes single-step defections, "
        "sustains retaliation if abuse continues, and returns to cooperation "
        "once trust is rebuilt."
    ),
    mutation_rate=0.08,
    crossover_rate=0.6,
    genome=[
        Gene(condition=GeneCondition(round_range=(1, 1)), response=Move.COOPERATE),
        Gene(
            condition=GeneCondition(opponent_last_move=Move.DEFECT, self_last_move=Move.COOPERATE),
            response=Move.DEFECT,
            weight=1.5,
        ),
        Gene(
            condition=GeneCondition(opponent_last_move=Move.DEFECT, self_last_move=Move.DEFECT),
            response=Move.DEFECT,
            weight=0.75,
        ),
        Gene(
            condition=GeneCondition(opponent_last_move=Move.COOPERATE, self_last_move=Move.DEFECT),
            response=Move.COOPERATE,
        ),
        Gene(condition=GeneCondition(), response=Move.COOPERATE),
    ],
)

introductory_genetic = create_genetic_strategy(INTRODUCTORY_GENETIC_CONFIG)

GENETIC_STRATEGY_CONFIGS = {
    INTRODUCTORY_GENETIC_CONFIG.name: INTRODUCTORY_GENETIC_CONFIG,
}
