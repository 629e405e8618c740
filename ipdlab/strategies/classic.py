"""Hand-written strategies from the iterated dilemma literature.

Each strategy is a FunctionStrategy over a small decision function.
Randomized strategies draw from ``history.random`` so seeded tournaments
stay reproducible.
"""

from ..core.types import FunctionStrategy, GameHistory, Move

C = Move.COOPERATE
D = Move.DEFECT

# Probability Generous Tit-for-Tat forgives a defection
FORGIVENESS_RATE = 0.2
# Pavlov treats a last-round payoff at or above this as a win
PAVLOV_WIN_THRESHOLD = 3


def _always_cooperate(history: GameHistory, round_number: int) -> Move:
    return C


def _always_defect(history: GameHistory, round_number: int) -> Move:
    return D


def _tit_for_tat(history: GameHistory, round_number: int) -> Move:
    if history.opponent_moves:
        return history.opponent_moves[-1]
    return C


def _suspicious_tit_for_tat(history: GameHistory, round_number: int) -> Move:
    if not history.opponent_moves:
        return D
    return history.opponent_moves[-1]


def _generous_tit_for_tat(history: GameHistory, round_number: int) -> Move:
    if not history.opponent_moves or history.opponent_moves[-1] is C:
        return C
    return C if history.random() < FORGIVENESS_RATE else D


def _tit_for_two_tats(history: GameHistory, round_number: int) -> Move:
    moves = history.opponent_moves
    if len(moves) < 2:
        return moves[-1] if moves else C
    return D if moves[-1] is D and moves[-2] is D else C


def _grudger(history: GameHistory, round_number: int) -> Move:
    return D if D in history.opponent_moves else C


def _soft_grudger(history: GameHistory, round_number: int) -> Move:
    """Punish each defection with two defections, then forgive."""
    moves = history.opponent_moves
    if round_number == 0 or D not in moves:
        return C
    last_defection = len(moves) - 1 - moves[::-1].index(D)
    rounds_since = len(moves) - 1 - last_defection
    return D if rounds_since < 2 else C


def _pavlov(history: GameHistory, round_number: int) -> Move:
    """Win-stay, lose-shift on the previous round's payoff."""
    if round_number == 0:
        return C
    last_move = history.player_moves[round_number - 1]
    last_payoff = history.scores[round_number - 1] if history.scores else 0
    if last_payoff >= PAVLOV_WIN_THRESHOLD:
        return last_move
    return last_move.opposite


def _prober(history: GameHistory, round_number: int) -> Move:
    """Open D, C, C; exploit opponents that never retaliated, else play Tit-for-Tat."""
    if round_number == 0:
        return D
    if round_number in (1, 2):
        return C
    moves = history.opponent_moves
    retaliated = moves[0] is D or moves[1] is D
    return moves[round_number - 1] if retaliated else D


def _alternator(history: GameHistory, round_number: int) -> Move:
    return C if round_number % 2 == 0 else D


def _random(history: GameHistory, round_number: int) -> Move:
    return C if history.random() < 0.5 else D


ALWAYS_COOPERATE = FunctionStrategy(
    "Always Cooperate", "Always cooperates", _always_cooperate
)
ALWAYS_DEFECT = FunctionStrategy(
    "Always Defect", "Always defects", _always_defect
)
TIT_FOR_TAT = FunctionStrategy(
    "Tit-for-Tat", "Copies opponent's last move", _tit_for_tat
)
SUSPICIOUS_TIT_FOR_TAT = FunctionStrategy(
    "Sus Tit-for-Tat",
    "Opens with defection, then mirrors the opponent's previous move.",
    _suspicious_tit_for_tat,
)
GENEROUS_TIT_FOR_TAT = FunctionStrategy(
    "Generous Tit-for-Tat",
    "Copies the opponent but occasionally forgives defections with 20% probability.",
    _generous_tit_for_tat,
)
TIT_FOR_TWO_TATS = FunctionStrategy(
    "Tit for Two Tats",
    "Defects only after two consecutive opponent defections.",
    _tit_for_two_tats,
)
GRUDGER = FunctionStrategy(
    "Grudger",
    "Cooperates until the opponent defects once, then always defects.",
    _grudger,
)
SOFT_GRUDGER = FunctionStrategy(
    "Soft Grudger",
    "Forgives after punishing defections with two retaliatory defects.",
    _soft_grudger,
)
PAVLOV = FunctionStrategy(
    "Pavlov (Win-Stay)",
    "Repeats last move if it yielded a high payoff; otherwise switches.",
    _pavlov,
)
PROBER = FunctionStrategy(
    "Prober",
    "Tries DEFECT-COOPERATE-COOPERATE probe, defects if opponent retaliates.",
    _prober,
)
ALTERNATOR = FunctionStrategy(
    "Alternator", "Alternates between cooperate and defect.", _alternator
)
RANDOM = FunctionStrategy("Random", "Random 50/50 choice", _random)

CLASSIC_STRATEGIES = [
    ALWAYS_COOPERATE,
    ALWAYS_DEFECT,
    TIT_FOR_TAT,
    SUSPICIOUS_TIT_FOR_TAT,
    GENEROUS_TIT_FOR_TAT,
    TIT_FOR_TWO_TATS,
    GRUDGER,
    SOFT_GRUDGER,
    PAVLOV,
    PROBER,
    ALTERNATOR,
    RANDOM,
]
