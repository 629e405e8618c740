"""Tests for tournament summaries and frames."""

import polars as pl
import pytest

from ..core.types import FunctionStrategy, Move, PayoffMatrix
from ..experiments.tournament import SwissFormat, Tournament
from .tournament_analytics import (
    head_to_head_frame,
    opponent_breakdown,
    standings_frame,
    summarize_results,
)

PAYOFF = PayoffMatrix(temptation=5, reward=3, punishment=1, sucker=0)


def constant(name: str, move: Move) -> FunctionStrategy:
    return FunctionStrategy(name, f"{name} strategy", lambda history, round_number: move)


COOPERATOR = constant("Cooperator", Move.COOPERATE)
DEFECTOR = constant("Defector", Move.DEFECT)


def round_robin():
    return Tournament().run([COOPERATOR, DEFECTOR], 1, 0, PAYOFF, 1).results


class TestSummarizeResults:
    """Tests for per-strategy rate summaries."""

    def test_rates_and_differentials(self):
        summaries = summarize_results(round_robin())

        defector = summaries["Defector"]
        assert defector.win_rate == 1.0
        assert defector.loss_rate == 0.0
        assert defector.head_to_head[0].score_differential == 5

        cooperator = summaries["Cooperator"]
        assert cooperator.losses == 1
        assert cooperator.loss_rate == 1.0
        assert cooperator.head_to_head[0].score_differential == -5
        assert cooperator.rating is not None

    def test_byes_count_towards_matches(self):
        strategies = [constant(name, Move.COOPERATE) for name in ("A", "B", "C")]
        outcome = Tournament().run_with_format(SwissFormat(), strategies, 2, 0, PAYOFF, 7)
        summary = summarize_results(outcome.results)["A"]

        assert summary.matches_played == 3
        assert summary.wins == 1
        assert summary.draws == 2
        assert summary.win_rate == pytest.approx(1 / 3)
        assert summary.draw_rate == pytest.approx(2 / 3)


class TestFrames:
    """Tests for the polars views."""

    def test_standings_frame(self):
        frame = standings_frame(round_robin())

        assert frame.columns[0] == "rank"
        assert frame["rank"].to_list() == [1, 2]
        assert frame["name"].to_list() == ["Defector", "Cooperator"]
        assert frame["total_score"].to_list() == [5.0, 0.0]
        assert frame.schema["rating"] == pl.Float64

    def test_empty_frames(self):
        assert standings_frame([]).is_empty()
        assert head_to_head_frame([]).is_empty()
        assert opponent_breakdown([]).is_empty()

    def test_head_to_head_frame(self):
        frame = head_to_head_frame(round_robin())

        assert frame.height == 2
        row = frame.filter(pl.col("strategy") == "Defector").row(0, named=True)
        assert row["opponent"] == "Cooperator"
        assert row["score_differential"] == 5.0
        assert row["win_rate"] == 1.0

    def test_opponent_breakdown(self):
        frame = opponent_breakdown(round_robin())

        assert frame["opponent"].to_list() == ["Defector", "Cooperator"]
        assert frame["pairs"].to_list() == [1, 1]
        assert frame["mean_differential"].to_list() == [-5.0, 5.0]
        assert frame["score_for"].to_list() == [5.0, 0.0]
