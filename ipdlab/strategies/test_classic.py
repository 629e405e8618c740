"""Tests for the classic strategy catalog."""

import pytest

from ..core.types import GameHistory, Move
from . import DEFAULT_STRATEGIES
from .classic import (
    ALTERNATOR,
    GENEROUS_TIT_FOR_TAT,
    GRUDGER,
    PAVLOV,
    PROBER,
    SOFT_GRUDGER,
    SUSPICIOUS_TIT_FOR_TAT,
    TIT_FOR_TAT,
    TIT_FOR_TWO_TATS,
)

C = Move.COOPERATE
D = Move.DEFECT


def history(player=(), opponent=(), scores=(), draw=0.5):
    return GameHistory(list(player), list(opponent), list(scores), [], lambda: draw)


class TestReactiveStrategies:
    """Tests for strategies reacting to the opponent's last moves."""

    def test_tit_for_tat(self):
        assert TIT_FOR_TAT.play(history(), 0) is C
        assert TIT_FOR_TAT.play(history([C], [D]), 1) is D

    def test_suspicious_tit_for_tat_opens_with_defection(self):
        assert SUSPICIOUS_TIT_FOR_TAT.play(history(), 0) is D
        assert SUSPICIOUS_TIT_FOR_TAT.play(history([D], [C]), 1) is C

    def test_generous_tit_for_tat_forgives_on_low_draw(self):
        assert GENEROUS_TIT_FOR_TAT.play(history([C], [D], draw=0.1), 1) is C
        assert GENEROUS_TIT_FOR_TAT.play(history([C], [D], draw=0.5), 1) is D

    def test_tit_for_two_tats(self):
        assert TIT_FOR_TWO_TATS.play(history([C, C], [C, D]), 2) is C
        assert TIT_FOR_TWO_TATS.play(history([C, C], [D, D]), 2) is D

    def test_grudger_never_forgives(self):
        moves = [D] + [C] * 5
        assert GRUDGER.play(history([C] * 6, moves), 6) is D

    def test_soft_grudger_punishes_twice(self):
        assert SOFT_GRUDGER.play(history([C], [D]), 1) is D
        assert SOFT_GRUDGER.play(history([C, D], [D, C]), 2) is D
        assert SOFT_GRUDGER.play(history([C, D, D], [D, C, C]), 3) is C


class TestStatefulStrategies:
    """Tests for Pavlov, Prober, and Alternator."""

    def test_pavlov_stays_after_win(self):
        assert PAVLOV.play(history([D], [C], [5]), 1) is D

    def test_pavlov_shifts_after_loss(self):
        assert PAVLOV.play(history([C], [D], [0]), 1) is D
        assert PAVLOV.play(history([D], [D], [1]), 1) is C

    def test_prober_opening(self):
        assert [PROBER.play(history(), r) for r in range(3)] == [D, C, C]

    def test_prober_exploits_non_retaliators(self):
        assert PROBER.play(history([D, C, C], [C, C, C]), 3) is D

    def test_prober_mirrors_retaliators(self):
        assert PROBER.play(history([D, C, C], [C, D, C]), 3) is C

    def test_alternator(self):
        assert [ALTERNATOR.play(history(), r) for r in range(4)] == [C, D, C, D]


class TestDefaultStrategies:
    """Tests for the default roster."""

    def test_names_are_unique(self):
        names = [strategy.name for strategy in DEFAULT_STRATEGIES]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("strategy", DEFAULT_STRATEGIES, ids=lambda s: s.name)
    def test_every_strategy_opens_with_a_move(self, strategy):
        assert strategy.play(history(), 0) in (C, D)
