"""Per-strategy rates, score differentials, and tabular views of results."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, TYPE_CHECKING

import polars as pl

if TYPE_CHECKING:
    from ..experiments.tournament import HeadToHeadSummary, TournamentResult


@dataclass
class HeadToHeadAnalytics:
    """Head-to-head record with rates and score differential."""
    opponent: str
    matches: int
    wins: int
    draws: int
    losses: int
    player_score: float
    opponent_score: float
    average_score: float
    score_differential: float
    win_rate: float
    draw_rate: float
    loss_rate: float


@dataclass
class StrategyAnalytics:
    """Summary of one strategy's tournament."""
    name: str
    rating: Optional[float]
    total_score: float
    average_score: float
    matches_played: int
    wins: int
    draws: int
    losses: int
    win_rate: float
    draw_rate: float
    loss_rate: float
    std_deviation: float
    head_to_head: List[HeadToHeadAnalytics] = field(default_factory=list)


def _rate(count: int, matches: int) -> float:
    return count / matches if matches > 0 else 0.0


def _enhance_head_to_head(entry: "HeadToHeadSummary") -> HeadToHeadAnalytics:
    return HeadToHeadAnalytics(
        opponent=entry.opponent,
        matches=entry.matches,
        wins=entry.wins,
        draws=entry.draws,
        losses=entry.losses,
        player_score=entry.player_score,
        opponent_score=entry.opponent_score,
        average_score=entry.average_score,
        score_differential=entry.player_score - entry.opponent_score,
        win_rate=_rate(entry.wins, entry.matches),
        draw_rate=_rate(entry.draws, entry.matches),
        loss_rate=_rate(entry.losses, entry.matches),
    )


def summarize_result(result: "TournamentResult") -> StrategyAnalytics:
    """Derive win, draw, and loss rates for one result.

    Draws and losses come from the head-to-head records. Byes count as
    matches played and wins, so rates are taken over ``matches_played``
    and only fall back to the head-to-head match total when it is zero.
    """
    draws = sum(entry.draws for entry in result.head_to_head)
    losses = sum(entry.losses for entry in result.head_to_head)
    matches = result.matches_played or sum(entry.matches for entry in result.head_to_head)

    return StrategyAnalytics(
        name=result.name,
        rating=result.rating,
        total_score=result.total_score,
        average_score=result.average_score,
        matches_played=matches,
        wins=result.wins,
        draws=draws,
        losses=losses,
        win_rate=_rate(result.wins, matches),
        draw_rate=_rate(draws, matches),
        loss_rate=_rate(losses, matches),
        std_deviation=result.std_deviation,
        head_to_head=[_enhance_head_to_head(entry) for entry in result.head_to_head],
    )


def summarize_results(results: Sequence["TournamentResult"]) -> Dict[str, StrategyAnalytics]:
    """Summaries keyed by strategy name, in result order."""
    return {result.name: summarize_result(result) for result in results}


def standings_frame(results: Sequence["TournamentResult"]) -> pl.DataFrame:
    """Standings table, one row per strategy, ranked by total score.

    Args:
        results: Tournament results

    Returns:
        DataFrame with rank, score, rate, and rating columns; empty when
        there are no results
    """
    if not results:
        return pl.DataFrame()

    rows = []
    for summary in summarize_results(results).values():
        rows.append({
            "name": summary.name,
            "total_score": float(summary.total_score),
            "average_score": float(summary.average_score),
            "std_deviation": float(summary.std_deviation),
            "matches_played": summary.matches_played,
            "wins": summary.wins,
            "draws": summary.draws,
            "losses": summary.losses,
            "win_rate": summary.win_rate,
            "draw_rate": summary.draw_rate,
            "loss_rate": summary.loss_rate,
            "rating": summary.rating,
        })

    return (
        pl.DataFrame(rows, schema_overrides={"rating": pl.Float64})
        .sort("total_score", descending=True, maintain_order=True)
        .with_row_index("rank", offset=1)
    )


def head_to_head_frame(results: Sequence["TournamentResult"]) -> pl.DataFrame:
    """Long-format head-to-head table, one row per strategy/opponent pair."""
    rows = []
    for result in results:
        for entry in summarize_result(result).head_to_head:
            rows.append({
                "strategy": result.name,
                "opponent": entry.opponent,
                "matches": entry.matches,
                "wins": entry.wins,
                "draws": entry.draws,
                "losses": entry.losses,
                "player_score": float(entry.player_score),
                "opponent_score": float(entry.opponent_score),
                "score_differential": float(entry.score_differential),
                "win_rate": entry.win_rate,
            })

    if not rows:
        return pl.DataFrame()
    return pl.DataFrame(rows)


def opponent_breakdown(results: Sequence["TournamentResult"]) -> pl.DataFrame:
    """Aggregate how every opponent fared across the field.

    Returns:
        DataFrame with one row per opponent: pairs faced, the opponent's
        own score, the field's score against it, and the mean differential
        of the strategies that played it (lowest first)
    """
    frame = head_to_head_frame(results)
    if frame.is_empty():
        return frame
    return frame.group_by("opponent").agg([
        pl.len().alias("pairs"),
        pl.col("opponent_score").sum().alias("score_for"),
        pl.col("player_score").sum().alias("score_against"),
        pl.col("score_differential").mean().alias("mean_differential"),
    ]).sort(["mean_differential", "opponent"])
