"""Pairwise head-to-head matrix built from tournament results."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..experiments.tournament import TournamentResult


@dataclass
class HeadToHeadCell:
    """One strategy's record against one opponent."""
    strategy: str
    opponent: str
    matches: int
    player_score: float
    opponent_score: float
    score_differential: float
    wins: int
    draws: int
    losses: int
    average_score: float


@dataclass
class HeadToHeadMatrix:
    """Rows and columns follow the order of ``strategies``.

    ``differentials`` holds player minus opponent score per cell, NaN where
    a pair never met.
    """
    strategies: List[str]
    cells: List[List[Optional[HeadToHeadCell]]]
    differentials: np.ndarray
    min_differential: float
    max_differential: float


def build_head_to_head_matrix(results: Sequence["TournamentResult"]) -> HeadToHeadMatrix:
    """Arrange every head-to-head summary into a strategy x opponent grid.

    Args:
        results: Tournament results, in the order rows should appear

    Returns:
        HeadToHeadMatrix; min and max differential are 0 when nothing was played
    """
    strategies = [result.name for result in results]
    index_of = {name: index for index, name in enumerate(strategies)}
    size = len(strategies)

    cells: List[List[Optional[HeadToHeadCell]]] = [[None] * size for _ in range(size)]
    differentials = np.full((size, size), np.nan)

    for result in results:
        row = index_of[result.name]
        for summary in result.head_to_head:
            column = index_of.get(summary.opponent)
            if column is None:
                continue
            differential = summary.player_score - summary.opponent_score
            cells[row][column] = HeadToHeadCell(
                strategy=result.name,
                opponent=summary.opponent,
                matches=summary.matches,
                player_score=summary.player_score,
                opponent_score=summary.opponent_score,
                score_differential=differential,
                wins=summary.wins,
                draws=summary.draws,
                losses=summary.losses,
                average_score=summary.average_score,
            )
            differentials[row, column] = differential

    if np.isnan(differentials).all():
        min_differential = max_differential = 0.0
    else:
        min_differential = float(np.nanmin(differentials))
        max_differential = float(np.nanmax(differentials))

    return HeadToHeadMatrix(
        strategies=strategies,
        cells=cells,
        differentials=differentials,
        min_differential=min_differential,
        max_differential=max_differential,
    )
