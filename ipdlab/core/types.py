"""Type definitions for the ipdlab package."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Protocol, runtime_checkable

from .random import RandomSource, create_random_source


class Move(str, Enum):
    """A single-round action."""
    COOPERATE = "COOPERATE"
    DEFECT = "DEFECT"

    @property
    def opposite(self) -> "Move":
        return Move.DEFECT if self is Move.COOPERATE else Move.COOPERATE


@dataclass(frozen=True)
class PayoffMatrix:
    """The 2x2 reward table of a symmetric two-player game.

    The classic dilemma ordering is temptation > reward > punishment > sucker,
    but any numeric values are accepted (Stag Hunt, Chicken, ...).
    """
    temptation: float
    reward: float
    punishment: float
    sucker: float


DEFAULT_PAYOFF_MATRIX = PayoffMatrix(temptation=5, reward=3, punishment=1, sucker=0)


@dataclass
class GameHistory:
    """Match transcript as seen from one player's side.

    All lists are indexed by round. ``random`` is the match random source,
    shared with noise application so seeded runs stay reproducible.
    """
    player_moves: List[Move] = field(default_factory=list)
    opponent_moves: List[Move] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)
    opponent_scores: List[float] = field(default_factory=list)
    random: RandomSource = field(default_factory=create_random_source, repr=False, compare=False)


@runtime_checkable
class Strategy(Protocol):
    """Decision rule producing a move from match history."""

    name: str
    description: str

    def play(self, history: GameHistory, round_number: int) -> Move:
        ...


@dataclass(frozen=True)
class FunctionStrategy:
    """Strategy backed by a plain decision function."""
    name: str
    description: str
    decide: Callable[[GameHistory, int], Move] = field(repr=False, compare=False)

    def play(self, history: GameHistory, round_number: int) -> Move:
        return self.decide(history, round_number)


@dataclass(frozen=True)
class MatchResult:
    """Result of a single repeated game between two strategies."""
    player1: str
    player2: str
    player1_score: float
    player2_score: float
    rounds: int
