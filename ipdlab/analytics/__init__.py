"""Ratings and analytics over tournament and evolution results."""

from .elo import (
    EloOutcome,
    ACTUAL_SCORES,
    EloOptions,
    EloMatchResult,
    expected_score,
    update_elo_rating,
    process_elo_matches,
)
from .head_to_head import (
    HeadToHeadCell,
    HeadToHeadMatrix,
    build_head_to_head_matrix,
)
from .tournament_analytics import (
    HeadToHeadAnalytics,
    StrategyAnalytics,
    summarize_result,
    summarize_results,
    standings_frame,
    head_to_head_frame,
    opponent_breakdown,
)
from .evolution_analytics import (
    EvolutionMetricPoint,
    EvolutionAnalytics,
    summarize_evolution,
    evolution_history_frame,
)

__all__ = [
    # Elo
    "EloOutcome",
    "ACTUAL_SCORES",
    "EloOptions",
    "EloMatchResult",
    "expected_score",
    "update_elo_rating",
    "process_elo_matches",
    # Head-to-head
    "HeadToHeadCell",
    "HeadToHeadMatrix",
    "build_head_to_head_matrix",
    # Tournament analytics
    "HeadToHeadAnalytics",
    "StrategyAnalytics",
    "summarize_result",
    "summarize_results",
    "standings_frame",
    "head_to_head_frame",
    "opponent_breakdown",
    # Evolution analytics
    "EvolutionMetricPoint",
    "EvolutionAnalytics",
    "summarize_evolution",
    "evolution_history_frame",
]
