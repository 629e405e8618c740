"""Tests for the match engine."""

import pytest

from ..core.types import FunctionStrategy, GameHistory, Move, PayoffMatrix
from .match import apply_noise, payoff_for, play_match

PAYOFF = PayoffMatrix(temptation=7, reward=4, punishment=2, sucker=0)


def constant(name: str, move: Move) -> FunctionStrategy:
    return FunctionStrategy(name, f"{name} strategy", lambda history, round_number: move)


class TestPayoffTable:
    """Tests for payoff_for."""

    @pytest.mark.parametrize("move1,move2,expected", [
        (Move.COOPERATE, Move.COOPERATE, (4, 4)),
        (Move.COOPERATE, Move.DEFECT, (0, 7)),
        (Move.DEFECT, Move.COOPERATE, (7, 0)),
        (Move.DEFECT, Move.DEFECT, (2, 2)),
    ])
    def test_all_outcomes(self, move1, move2, expected):
        assert payoff_for(move1, move2, PAYOFF) == expected


class TestPlayMatch:
    """Tests for play_match."""

    def test_mutual_cooperation_scores_reward(self):
        coop = constant("Cooperator", Move.COOPERATE)
        result = play_match(coop, coop, 3, 0, PAYOFF, lambda: 0.9)
        assert result.player1_score == 3 * PAYOFF.reward
        assert result.player2_score == 3 * PAYOFF.reward
        assert result.rounds == 3

    def test_noise_flips_both_moves(self):
        coop = constant("Cooperator", Move.COOPERATE)
        defect = constant("Defector", Move.DEFECT)
        result = play_match(coop, defect, 1, 1, PAYOFF, lambda: 0.0)
        assert result.player1_score == PAYOFF.temptation
        assert result.player2_score == PAYOFF.sucker

    def test_names_recorded(self):
        result = play_match(
            constant("A", Move.COOPERATE), constant("B", Move.DEFECT), 1, 0, PAYOFF, lambda: 0.5
        )
        assert (result.player1, result.player2) == ("A", "B")

    def test_histories_are_symmetric_views(self):
        seen = []

        def recorder(history: GameHistory, round_number: int) -> Move:
            seen.append((list(history.player_moves), list(history.opponent_moves),
                         list(history.scores), list(history.opponent_scores)))
            return Move.COOPERATE

        observer = FunctionStrategy("Observer", "records history", recorder)
        play_match(observer, constant("Defector", Move.DEFECT), 3, 0, PAYOFF, lambda: 0.5)

        assert seen[0] == ([], [], [], [])
        assert seen[2] == (
            [Move.COOPERATE, Move.COOPERATE],
            [Move.DEFECT, Move.DEFECT],
            [0, 0],
            [7, 7],
        )

    def test_strategy_sees_flipped_move_next_round(self):
        seen = []

        def recorder(history: GameHistory, round_number: int) -> Move:
            seen.append(list(history.opponent_moves))
            return Move.COOPERATE

        observer = FunctionStrategy("Observer", "records history", recorder)
        # every draw flips: the opponent's chosen COOPERATE is enacted as DEFECT
        play_match(observer, constant("Cooperator", Move.COOPERATE), 2, 1, PAYOFF, lambda: 0.0)
        assert seen == [[], [Move.DEFECT]]

    def test_strategy_receives_match_random_source(self):
        sources = []

        def recorder(history: GameHistory, round_number: int) -> Move:
            sources.append(history.random)
            return Move.COOPERATE

        def draw() -> float:
            return 0.3

        observer = FunctionStrategy("Observer", "records source", recorder)
        play_match(observer, observer, 1, 0, PAYOFF, draw)
        assert sources == [draw, draw]

    def test_string_moves_are_accepted(self):
        text = FunctionStrategy("Text", "returns raw strings", lambda h, r: "DEFECT")
        result = play_match(text, constant("Cooperator", Move.COOPERATE), 1, 0, PAYOFF, lambda: 0.5)
        assert result.player1_score == PAYOFF.temptation


class TestApplyNoise:
    """Tests for apply_noise."""

    def test_zero_rate_never_draws(self):
        def explode() -> float:
            raise AssertionError("random source should not be used")

        assert apply_noise(Move.COOPERATE, 0, explode) is Move.COOPERATE

    def test_draw_below_rate_flips(self):
        assert apply_noise(Move.DEFECT, 0.5, lambda: 0.49) is Move.COOPERATE

    def test_draw_at_rate_keeps_move(self):
        assert apply_noise(Move.DEFECT, 0.5, lambda: 0.5) is Move.DEFECT
