"""Match engine for repeated two-player games.

Plays a fixed number of rounds between two strategies, applies
execution noise, and accumulates both players' histories and scores.
"""

from typing import Tuple

from ..core.random import RandomSource
from ..core.types import GameHistory, MatchResult, Move, PayoffMatrix, Strategy


def payoff_for(move1: Move, move2: Move, payoff_matrix: PayoffMatrix) -> Tuple[float, float]:
    """Look up both players' payoffs for a pair of moves.

    Args:
        move1: First player's enacted move
        move2: Second player's enacted move
        payoff_matrix: Reward table

    Returns:
        Tuple of (player1 payoff, player2 payoff)
    """
    if move1 is Move.COOPERATE and move2 is Move.COOPERATE:
        return payoff_matrix.reward, payoff_matrix.reward
    if move1 is Move.COOPERATE:
        return payoff_matrix.sucker, payoff_matrix.temptation
    if move2 is Move.COOPERATE:
        return payoff_matrix.temptation, payoff_matrix.sucker
    return payoff_matrix.punishment, payoff_matrix.punishment


def apply_noise(move: Move, error_rate: float, random_source: RandomSource) -> Move:
    """Invert a move with probability ``error_rate``.

    No draw is taken from the random source when the error rate is zero.
    """
    if error_rate > 0 and random_source() < error_rate:
        return move.opposite
    return move


def play_match(
    strategy1: Strategy,
    strategy2: Strategy,
    rounds: int,
    error_rate: float,
    payoff_matrix: PayoffMatrix,
    random_source: RandomSource,
) -> MatchResult:
    """Play one repeated game between two strategies.

    Each strategy sees itself as the player and the other as the opponent.
    Noise is applied after both moves are chosen, so a strategy only learns
    of a flipped move through the next round's history.

    Args:
        strategy1: First player
        strategy2: Second player
        rounds: Number of rounds to play
        error_rate: Per-move inversion probability
        payoff_matrix: Reward table
        random_source: Source shared by noise and strategy randomness

    Returns:
        MatchResult with both total scores
    """
    moves1 = []
    moves2 = []
    scores1 = []
    scores2 = []
    history1 = GameHistory(moves1, moves2, scores1, scores2, random_source)
    history2 = GameHistory(moves2, moves1, scores2, scores1, random_source)

    total1 = 0.0
    total2 = 0.0

    for round_number in range(rounds):
        chosen1 = Move(strategy1.play(history1, round_number))
        chosen2 = Move(strategy2.play(history2, round_number))

        move1 = apply_noise(chosen1, error_rate, random_source)
        move2 = apply_noise(chosen2, error_rate, random_source)

        points1, points2 = payoff_for(move1, move2, payoff_matrix)
        total1 += points1
        total2 += points2

        moves1.append(move1)
        moves2.append(move2)
        scores1.append(points1)
        scores2.append(points2)

    return MatchResult(
        player1=strategy1.name,
        player2=strategy2.name,
        player1_score=total1,
        player2_score=total2,
        rounds=rounds,
    )
