"""Elo ratings derived from tournament match outcomes.

Updates are applied sequentially: each match reads the ratings produced
by the matches before it, so replaying outcomes in a different order
gives different final ratings.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional

from ..core.config import DEFAULT_ELO_BASE_RATING, DEFAULT_ELO_K_FACTOR

logger = logging.getLogger(__name__)


class EloOutcome(str, Enum):
    """Result of a match from the player's perspective."""
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"

    @property
    def inverted(self) -> "EloOutcome":
        if self is EloOutcome.WIN:
            return EloOutcome.LOSS
        if self is EloOutcome.LOSS:
            return EloOutcome.WIN
        return EloOutcome.DRAW


ACTUAL_SCORES = {
    EloOutcome.WIN: 1.0,
    EloOutcome.DRAW: 0.5,
    EloOutcome.LOSS: 0.0,
}


@dataclass(frozen=True)
class EloOptions:
    """Rating parameters."""
    k_factor: float = DEFAULT_ELO_K_FACTOR
    base_rating: float = DEFAULT_ELO_BASE_RATING


@dataclass(frozen=True)
class EloMatchResult:
    """One rated match, in the order it was played."""
    player: str
    opponent: str
    outcome: EloOutcome

    def __post_init__(self):
        object.__setattr__(self, "outcome", EloOutcome(self.outcome))


def expected_score(player_rating: float, opponent_rating: float) -> float:
    """Logistic win expectancy of the player against the opponent."""
    return 1.0 / (1.0 + 10 ** ((opponent_rating - player_rating) / 400.0))


def update_elo_rating(
    player_rating: Optional[float],
    opponent_rating: Optional[float],
    outcome: EloOutcome,
    options: EloOptions = EloOptions(),
) -> float:
    """Compute the player's rating after one match.

    Args:
        player_rating: Current rating, or None for the base rating
        opponent_rating: Opponent's rating, or None for the base rating
        outcome: Match result from the player's perspective
        options: K-factor and base rating

    Returns:
        Updated player rating
    """
    current = options.base_rating if player_rating is None else player_rating
    opponent = options.base_rating if opponent_rating is None else opponent_rating
    actual = ACTUAL_SCORES[EloOutcome(outcome)]
    return current + options.k_factor * (actual - expected_score(current, opponent))


def process_elo_matches(
    initial_ratings: Mapping[str, Optional[float]],
    matches: Iterable[EloMatchResult],
    options: EloOptions = EloOptions(),
) -> Dict[str, float]:
    """Fold match outcomes into a rating table, in input order.

    Both participants are updated from their pre-match ratings. Entries with
    a None initial rating start from the base rating.

    Args:
        initial_ratings: Known ratings by name
        matches: Outcomes in chronological order
        options: K-factor and base rating

    Returns:
        Ratings for every name that had an initial rating or played a match
    """
    ratings = {name: rating for name, rating in initial_ratings.items() if rating is not None}

    count = 0
    for match in matches:
        player_rating = ratings.get(match.player, options.base_rating)
        opponent_rating = ratings.get(match.opponent, options.base_rating)

        ratings[match.player] = update_elo_rating(
            player_rating, opponent_rating, match.outcome, options
        )
        ratings[match.opponent] = update_elo_rating(
            opponent_rating, player_rating, EloOutcome(match.outcome).inverted, options
        )
        count += 1

    logger.debug("Processed %d Elo matches for %d players", count, len(ratings))
    return ratings
