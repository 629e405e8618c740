"""Genome data model for rule-based genetic strategies."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ...core.types import Move

GeneId = str
RoundRange = Tuple[int, int]


@dataclass(frozen=True)
class GeneCondition:
    """Predicate a gene must satisfy to fire.

    Absent fields are skipped. Last-move checks look only at the immediately
    preceding round; ``round_range`` is 1-based and inclusive on both ends.
    """
    opponent_last_move: Optional[Move] = None
    self_last_move: Optional[Move] = None
    round_range: Optional[RoundRange] = None

    def __post_init__(self):
        # accept plain strings and lists from serialized genomes
        if self.opponent_last_move is not None:
            object.__setattr__(self, "opponent_last_move", Move(self.opponent_last_move))
        if self.self_last_move is not None:
            object.__setattr__(self, "self_last_move", Move(self.self_last_move))
        if self.round_range is not None:
            start, end = self.round_range
            object.__setattr__(self, "round_range", (int(start), int(end)))


@dataclass(frozen=True)
class Gene:
    """A single condition -> response rule.

    ``weight`` biases the draw when several genes match (default 1).
    """
    condition: GeneCondition = field(default_factory=GeneCondition)
    response: Move = Move.COOPERATE
    id: Optional[GeneId] = None
    weight: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "response", Move(self.response))


Genome = List[Gene]


@dataclass
class GeneticStrategyConfig:
    """Serializable definition from which a genetic strategy is built."""
    name: str
    description: str
    genome: Genome
    mutation_rate: Optional[float] = None
    crossover_rate: Optional[float] = None
